import openpyxl
from io import BytesIO

from apps.core.utils import quantize_money


def export_statement_to_excel(hostel, hostel_stats, rows):
    """
    멤버별 정산표 엑셀 내보내기

    시트 상단에 호스텔 요약(총 식수, 총 지출, 평균 식비),
    그 아래 멤버별 식수 / 바자 금액 / 식비 / 잔액
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Statement"

    ws.append([hostel.hostel_name])
    ws.append(['Total Meals', hostel_stats.total_meals])
    ws.append(['Total Expenses', float(quantize_money(hostel_stats.total_pool))])
    ws.append(['Avg Meal Cost', float(quantize_money(hostel_stats.avg_meal_cost))])
    ws.append([])

    ws.append(['Member', 'Email', 'Meals', 'Bazar Amount', 'Meal Cost', 'Balance'])
    for member, stats in rows:
        ws.append([
            member.name,
            member.email,
            stats.personal_meals,
            float(quantize_money(stats.contribution)),
            float(quantize_money(stats.personal_meal_cost)),
            float(quantize_money(stats.balance)),
        ])

    ws.column_dimensions['A'].width = 24
    ws.column_dimensions['B'].width = 30

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
