from django import forms

from .models import Reservation
from .services import validate_stay


class ReservationForm(forms.Form):
    guest_name = forms.CharField(max_length=150)
    guest_email = forms.EmailField()
    guest_phone = forms.CharField(max_length=30)
    check_in = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    check_out = forms.DateField(widget=forms.DateInput(attrs={"type": "date"}))
    guests = forms.IntegerField(min_value=1, initial=1, required=False)
    message = forms.CharField(widget=forms.Textarea(attrs={"rows": 3}), required=False)

    def __init__(self, *args, profile=None, **kwargs):
        super().__init__(*args, **kwargs)
        if profile is not None and not self.is_bound:
            self.initial.update(
                {
                    "guest_name": profile.full_name,
                    "guest_email": profile.user.email,
                    "guest_phone": profile.phone,
                }
            )

    def clean_guest_name(self):
        return self.cleaned_data["guest_name"].strip()

    def clean_guest_phone(self):
        return self.cleaned_data["guest_phone"].strip()

    def clean_guests(self):
        return self.cleaned_data.get("guests") or 1

    def clean_message(self):
        return self.cleaned_data["message"].strip()

    def clean(self):
        cleaned_data = super().clean()
        check_in = cleaned_data.get("check_in")
        check_out = cleaned_data.get("check_out")
        if check_in and check_out:
            try:
                validate_stay(check_in, check_out, cleaned_data.get("guests") or 1)
            except forms.ValidationError as exc:
                self.add_error("check_out", exc)
        return cleaned_data


class ReservationStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Reservation.Status.choices)
