from django import forms

from .models import Expense


class ExpenseForm(forms.ModelForm):
    """지출 입력/수정 폼"""

    class Meta:
        model = Expense
        fields = ['description', 'amount', 'date']
        widgets = {
            'description': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. Gas cylinder'}),
            'amount': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': '0.01'}),
            'date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}, format='%Y-%m-%d'),
        }
        labels = {
            'description': 'Description',
            'amount': 'Amount',
            'date': 'Date',
        }


class ExpenseFilterForm(forms.Form):
    """월별 필터 (비우면 전체)"""

    month = forms.DateField(
        required=False,
        input_formats=['%Y-%m'],
        widget=forms.DateInput(attrs={'type': 'month', 'class': 'form-control'}),
        label='Month'
    )
