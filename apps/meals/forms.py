from django import forms
from django.utils import timezone


class MealChartForm(forms.Form):
    """식사표 생성 (날짜 선택)"""

    date = forms.DateField(
        label='Select Date',
        widget=forms.DateInput(attrs={'type': 'date', 'class': 'form-control'})
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.is_bound:
            self.fields['date'].initial = timezone.localdate()
