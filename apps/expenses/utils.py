import openpyxl
from io import BytesIO

from apps.core.utils import quantize_money


def export_expenses_to_excel(queryset):
    """
    지출 내역을 엑셀로 내보내기 (날짜, 내용, 금액 + 합계 행)
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Expenses"

    ws.append(['Date', 'Description', 'Amount'])

    total = 0
    for expense in queryset:
        # Decimal을 float으로 변환 (엑셀 호환)
        amount = float(quantize_money(expense.amount))
        total += amount
        ws.append([
            expense.date.strftime('%Y-%m-%d') if expense.date else '',
            expense.description,
            amount,
        ])

    ws.append([])
    ws.append(['', 'Total', round(total, 2)])

    ws.column_dimensions['A'].width = 12
    ws.column_dimensions['B'].width = 40
    ws.column_dimensions['C'].width = 14

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
