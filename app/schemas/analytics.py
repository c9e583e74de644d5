from typing import Dict, List
from pydantic import BaseModel


class ChannelTotals(BaseModel):
    cash: str
    card: str
    upi: str


class MonthlyFigures(BaseModel):
    month: str  # YYYY-MM
    sales: str
    expenses: str
    net: str


class BusinessSummaryResponse(BaseModel):
    """Business totals. All amounts are canonical decimal text."""
    total_sales: str
    total_expenses: str
    net: str
    sales_by_channel: ChannelTotals
    expenses_by_category: Dict[str, str]
    monthly: List[MonthlyFigures]
