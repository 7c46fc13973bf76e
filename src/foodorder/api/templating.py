from __future__ import annotations

from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

from foodorder.domain.common.money import Money

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _format_money(value: Money) -> str:
    return f"${value.format()}"


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%a %b %d %H:%M")


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = _format_money
templates.env.filters["timestamp"] = _format_timestamp
