from django import forms
from django.contrib.auth.forms import AuthenticationForm, SetPasswordForm
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.hostels.models import Hostel, Member


class EmailAuthenticationForm(AuthenticationForm):
    """
    이메일 로그인 폼 (username = 이메일)

    role_model 에 프로필이 없는 계정은 로그인 자체를 막습니다.
    """
    role_model = None
    not_authorized_message = 'Not authorized'

    username = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'member@example.com',
            'autocomplete': 'email',
            'autofocus': True,
        })
    )
    password = forms.CharField(
        label='Password',
        strip=False,
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': 'Enter your password',
            'autocomplete': 'current-password',
        })
    )

    def clean_username(self):
        return self.cleaned_data['username'].strip().lower()

    def confirm_login_allowed(self, user):
        super().confirm_login_allowed(user)
        if self.role_model is not None and not self.role_model.objects.filter(user=user).exists():
            raise ValidationError(self.not_authorized_message, code='not_authorized')


class MemberLoginForm(EmailAuthenticationForm):
    role_model = Member
    not_authorized_message = 'Not authorized as member'


class AdminLoginForm(EmailAuthenticationForm):
    role_model = Hostel
    not_authorized_message = 'Not authorized as admin'


class AdminSignupForm(forms.Form):
    """
    호스텔 관리자 가입 폼
    - User + Hostel 을 한 트랜잭션으로 생성
    """
    hostel_name = forms.CharField(
        label='Hostel Name',
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Green View Mess'})
    )
    full_name = forms.CharField(
        label='Full Name',
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'})
    )
    email = forms.EmailField(
        label='Email',
        widget=forms.EmailInput(attrs={'class': 'form-control', 'autocomplete': 'email'})
    )
    password1 = forms.CharField(
        label='Password',
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control', 'autocomplete': 'new-password'})
    )
    password2 = forms.CharField(
        label='Confirm Password',
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control', 'autocomplete': 'new-password'})
    )

    def clean_email(self):
        """이메일 중복 확인 (로그인 아이디로 사용)"""
        email = self.cleaned_data['email'].strip().lower()
        if User.objects.filter(username__iexact=email).exists():
            raise ValidationError('This email is already registered.')
        return email

    def clean(self):
        cleaned_data = super().clean()
        password1 = cleaned_data.get('password1')
        password2 = cleaned_data.get('password2')

        if password1 and password2 and password1 != password2:
            self.add_error('password2', 'Passwords do not match')
        elif password1:
            try:
                validate_password(password1)
            except ValidationError as e:
                self.add_error('password1', e)

        return cleaned_data

    def save(self):
        data = self.cleaned_data
        with transaction.atomic():
            user = User.objects.create_user(
                username=data['email'],
                email=data['email'],
                password=data['password1'],
                first_name=data['full_name'][:150],
            )
            hostel = Hostel.objects.create(
                user=user,
                hostel_name=data['hostel_name'],
                full_name=data['full_name'],
                email=data['email'],
            )
        return hostel


class NewPasswordForm(SetPasswordForm):
    """새 비밀번호 + 확인 (기존 비밀번호 입력 없음)"""

    error_messages = {
        **SetPasswordForm.error_messages,
        'password_mismatch': 'Passwords do not match',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['new_password1'].label = 'New Password'
        self.fields['new_password2'].label = 'Confirm Password'
        for field in self.fields.values():
            field.widget.attrs['class'] = 'form-control'
