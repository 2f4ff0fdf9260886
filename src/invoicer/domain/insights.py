"""AI-generated business health summary.

The language model only narrates figures computed here from the invoice
collection. Its reply is shown as-is and never parsed.
"""

import json
import os
from typing import Any, Optional, Sequence

import google.generativeai as genai

from invoicer.domain.calculator import round_money
from invoicer.domain.entities import AppSettings, Invoice
from invoicer.domain.reporting import build_dashboard_report
from invoicer.utils.logs import logger

log = logger(__name__)

MODEL_NAME = "gemini-2.5-flash"
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")

MISSING_KEY_MESSAGE = "API Key is missing. Please check your environment configuration."
UNAVAILABLE_MESSAGE = (
    "Unable to generate insights at this time. Please check your network connection."
)


def get_api_key() -> Optional[str]:
    """Return the Gemini API key from the environment, if set."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def build_prompt(invoices: Sequence[Invoice], settings: AppSettings) -> str:
    """Build the analyst prompt from dashboard figures."""
    report = build_dashboard_report(invoices)
    monthly = {month.name: round_money(month.amount) for month in report.monthly_totals}
    return f"""You are a senior financial analyst for a boutique business named "{settings.business_name}".
Analyze the following financial data and provide a concise, encouraging, and strategic summary (max 3 sentences).

Data:
- Total Paid Revenue: {round_money(report.total_revenue)}
- Outstanding/Pending: {round_money(report.pending_amount)}
- Monthly Trend: {json.dumps(monthly)}
- Total Invoices: {report.invoice_count}

Focus on cash flow and growth. Use a professional but warm tone."""


def _create_model(api_key: str) -> Any:
    genai.configure(api_key=api_key)
    return genai.GenerativeModel(model_name=MODEL_NAME)


def analyze_business_health(
    invoices: Sequence[Invoice],
    settings: AppSettings,
    api_key: Optional[str] = None,
    model: Optional[Any] = None,
) -> str:
    """Ask Gemini for a short narrative summary of the business.

    Args:
        invoices: Invoice collection to summarize
        settings: Business settings (the business name goes in the prompt)
        api_key: Gemini API key; read from GEMINI_API_KEY or API_KEY if None
        model: Object with a ``generate_content(prompt)`` method; built from
            the API key if None

    Returns:
        The model's reply, or an explanatory message when no key is
        configured or generation fails
    """
    if model is None:
        if api_key is None:
            api_key = get_api_key()
        if not api_key:
            return MISSING_KEY_MESSAGE
        model = _create_model(api_key)

    prompt = build_prompt(invoices, settings)
    try:
        response = model.generate_content(prompt)
        text = response.text.strip()
    except Exception as e:
        log.warning("Gemini analysis failed: %s", e)
        return UNAVAILABLE_MESSAGE
    if not text:
        log.warning("Gemini returned an empty analysis")
        return UNAVAILABLE_MESSAGE
    return text
