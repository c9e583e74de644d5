from decimal import Decimal
from typing import Dict, List

from app.db.store import DataStore
from app.models.business import DailySalesInDB, ExpenseInDB
from app.repositories.business_repo import DailySalesRepository, ExpenseRepository
from app.schemas.analytics import BusinessSummaryResponse, ChannelTotals, MonthlyFigures
from app.utils.amounts import format_amount, to_decimal


class AnalyticsService:
    @staticmethod
    def summarize(sales: List[DailySalesInDB], expenses: List[ExpenseInDB]) -> BusinessSummaryResponse:
        """
        Aggregate daily sales and expenses.

        Produces overall totals, sales per payment channel, expenses per
        category and a month by month series (oldest month first).
        """
        zero = Decimal("0")

        # 1. Sales per channel
        channels = {"cash": zero, "card": zero, "upi": zero}
        for day in sales:
            channels["cash"] += to_decimal(day.cash_amount)
            channels["card"] += to_decimal(day.card_amount)
            channels["upi"] += to_decimal(day.upi_amount)
        total_sales = sum(channels.values(), zero)

        # 2. Expenses per category
        by_category: Dict[str, Decimal] = {}
        for expense in expenses:
            by_category[expense.category] = by_category.get(expense.category, zero) + to_decimal(expense.amount)
        total_expenses = sum(by_category.values(), zero)

        # 3. Monthly series
        monthly_sales: Dict[str, Decimal] = {}
        monthly_expenses: Dict[str, Decimal] = {}
        for day in sales:
            month = day.date.strftime("%Y-%m")
            monthly_sales[month] = monthly_sales.get(month, zero) + to_decimal(day.total_amount)
        for expense in expenses:
            month = expense.date.strftime("%Y-%m")
            monthly_expenses[month] = monthly_expenses.get(month, zero) + to_decimal(expense.amount)

        monthly = []
        for month in sorted(set(monthly_sales) | set(monthly_expenses)):
            month_sales = monthly_sales.get(month, zero)
            month_expenses = monthly_expenses.get(month, zero)
            monthly.append(MonthlyFigures(
                month=month,
                sales=format_amount(month_sales),
                expenses=format_amount(month_expenses),
                net=format_amount(month_sales - month_expenses)
            ))

        return BusinessSummaryResponse(
            total_sales=format_amount(total_sales),
            total_expenses=format_amount(total_expenses),
            net=format_amount(total_sales - total_expenses),
            sales_by_channel=ChannelTotals(**{k: format_amount(v) for k, v in channels.items()}),
            expenses_by_category={k: format_amount(v) for k, v in sorted(by_category.items())},
            monthly=monthly
        )

    @staticmethod
    async def for_user(store: DataStore, user_id: int) -> BusinessSummaryResponse:
        sales = await DailySalesRepository(store).list(user_id)
        expenses = await ExpenseRepository(store).list(user_id)
        return AnalyticsService.summarize(sales, expenses)
