"""Display helpers for the booking page: catalog table, select labels, submission message."""
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .catalog import PackageCatalog
from .config import settings
from .models import EstimateResult, TravelPackage
from .pricing.calculator import PriceCalculator

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def format_price(amount: float, symbol: str | None = None) -> str:
    if symbol is None:
        symbol = settings.currency_symbol
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"{symbol}{amount}"


def package_option_label(package: TravelPackage, symbol: str | None = None) -> str:
    return f"{package.destination} ({package.duration_days}d) - {format_price(package.base_price, symbol)}"


def submission_message(result: EstimateResult, symbol: str | None = None) -> str:
    return f"Booking submitted!\nEstimated total: {format_price(result.total, symbol)}"


def render_packages_table(catalog: PackageCatalog, calculator: PriceCalculator | None = None,
                          symbol: str | None = None) -> str:
    calculator = calculator or PriceCalculator()
    rows = [{
        'id': package.id,
        'destination': package.destination,
        'duration': f"{package.duration_days} Days",
        'base_price': format_price(package.base_price, symbol),
        'season': package.season,
        'final_price': format_price(calculator.final_price(package), symbol),
    } for package in catalog]
    env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=select_autoescape(['html', 'xml']))
    tpl = env.get_template('packages.html.j2')
    rendered = tpl.render(packages=rows)
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()
