from django import forms

from siteconfig.models import PaymentInfo, SiteSettings


class SiteSettingsForm(forms.ModelForm):
    class Meta:
        model = SiteSettings
        fields = [
            "site_name",
            "site_tagline",
            "contact_email",
            "contact_phone",
            "contact_address",
            "about_text",
            "footer_text",
        ]
        widgets = {
            "about_text": forms.Textarea(attrs={"rows": 4}),
            "footer_text": forms.Textarea(attrs={"rows": 2}),
        }


class PaymentInfoForm(forms.ModelForm):
    class Meta:
        model = PaymentInfo
        fields = [
            "bank_name",
            "account_number",
            "account_name",
            "momo_provider",
            "momo_number",
            "momo_name",
            "instructions",
            "is_active",
        ]
        widgets = {
            "instructions": forms.Textarea(attrs={"rows": 3}),
        }
