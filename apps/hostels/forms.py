"""호스텔 설정 및 멤버 관리 폼"""

from django import forms
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction

from .models import Hostel, Member


class HostelSettingsForm(forms.ModelForm):
    """호스텔 이름 / 관리자 이름 수정 (이메일은 변경 불가)"""

    class Meta:
        model = Hostel
        fields = ['hostel_name', 'full_name']
        widgets = {
            'hostel_name': forms.TextInput(attrs={'class': 'form-control'}),
            'full_name': forms.TextInput(attrs={'class': 'form-control'}),
        }
        labels = {
            'hostel_name': 'Hostel Name',
            'full_name': 'Full Name',
        }


class MemberForm(forms.ModelForm):
    """
    멤버 추가/수정 폼

    - 추가: 비밀번호 필수, 로그인 계정(User) 함께 생성
    - 수정: 비밀번호 필드 없음, 이메일 변경 시 User 도 함께 변경
    """
    password = forms.CharField(
        label='Password',
        strip=False,
        required=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control', 'autocomplete': 'new-password'})
    )

    class Meta:
        model = Member
        fields = ['name', 'email', 'bazar_amount']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Member name'}),
            'email': forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'member@example.com'}),
            'bazar_amount': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': '0'}),
        }
        labels = {
            'name': 'Name',
            'email': 'Email',
            'bazar_amount': 'Bazar Amount',
        }

    def __init__(self, *args, **kwargs):
        self.hostel = kwargs.pop('hostel', None)
        super().__init__(*args, **kwargs)

        if self.is_update:
            del self.fields['password']
        else:
            self.fields['password'].required = True

    @property
    def is_update(self):
        return bool(self.instance and self.instance.pk)

    def clean_email(self):
        """이메일 = 로그인 아이디, 다른 계정과 중복 불가"""
        email = self.cleaned_data['email'].strip().lower()

        users = User.objects.filter(username__iexact=email)
        if self.is_update:
            users = users.exclude(pk=self.instance.user_id)

        if users.exists():
            raise ValidationError('This email is already registered.')
        return email

    def clean_password(self):
        password = self.cleaned_data.get('password')
        if password:
            validate_password(password)
        return password

    def save(self, commit=True):
        member = super().save(commit=False)

        with transaction.atomic():
            if self.is_update:
                user = member.user
                if user.username != member.email:
                    user.username = member.email
                    user.email = member.email
                    user.save(update_fields=['username', 'email'])
            else:
                member.hostel = self.hostel
                member.user = User.objects.create_user(
                    username=member.email,
                    email=member.email,
                    password=self.cleaned_data['password'],
                    first_name=member.name[:150],
                )
            member.save()

        return member


class MemberSearchForm(forms.Form):
    """멤버 검색 폼"""

    search = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Search members...'
        }),
        label='Search'
    )
