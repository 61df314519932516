from django import forms
from django.contrib.auth import password_validation


class LoginForm(forms.Form):
    username = forms.CharField(max_length=150)
    password = forms.CharField(widget=forms.PasswordInput, strip=False)


class SettingsForm(forms.Form):
    email = forms.EmailField(required=False)
    current_password = forms.CharField(widget=forms.PasswordInput, required=False, strip=False)
    new_password = forms.CharField(widget=forms.PasswordInput, required=False, strip=False)

    def __init__(self, *args, user=None, **kwargs):
        self.user = user
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned = super().clean()
        new_password = cleaned.get("new_password")
        if not new_password:
            return cleaned
        current = cleaned.get("current_password")
        if not current:
            raise forms.ValidationError("Current password is required to change password")
        if not self.user.check_password(current):
            raise forms.ValidationError("Current password is incorrect")
        password_validation.validate_password(new_password, self.user)
        return cleaned

    def save(self):
        user = self.user
        fields = []
        if self.cleaned_data.get("new_password"):
            user.set_password(self.cleaned_data["new_password"])
            fields.append("password")
        if self.cleaned_data.get("email"):
            user.email = self.cleaned_data["email"]
            fields.append("email")
        if fields:
            user.save(update_fields=fields)
        return user
