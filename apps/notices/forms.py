from django import forms

from .models import Notice


class NoticeForm(forms.ModelForm):
    """공지 작성 폼"""

    class Meta:
        model = Notice
        fields = ['title', 'message']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Notice title'}),
            'message': forms.Textarea(attrs={'class': 'form-control', 'rows': 5, 'placeholder': 'Write your notice here...'}),
        }
        labels = {
            'title': 'Title',
            'message': 'Message',
        }
