from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from .models import Hostel
from .uploads import store_media_files, validate_media_file


class MultipleFileInput(forms.ClearableFileInput):
    allow_multiple_selected = True


class MultipleFileField(forms.FileField):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", MultipleFileInput(attrs={"accept": "image/*,video/*"}))
        super().__init__(*args, **kwargs)

    def clean(self, data, initial=None):
        single_file_clean = super().clean
        if isinstance(data, (list, tuple)):
            return [single_file_clean(item, initial) for item in data if item]
        if data:
            return [single_file_clean(data, initial)]
        return []


class HostelForm(forms.ModelForm):
    amenities_text = forms.CharField(
        label="Amenities",
        required=False,
        help_text="Comma separated, e.g. WiFi, Security, Laundry",
    )
    files = MultipleFileField(required=False)
    remove_images = forms.MultipleChoiceField(required=False, widget=forms.CheckboxSelectMultiple)
    remove_videos = forms.MultipleChoiceField(required=False, widget=forms.CheckboxSelectMultiple)

    class Meta:
        model = Hostel
        fields = [
            "name",
            "description",
            "location",
            "address",
            "price",
            "rooms",
            "status",
            "featured",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 5}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["status"].required = False
        self.fields["rooms"].required = False
        self.fields["remove_images"].choices = [(path, path) for path in self.instance.images or []]
        self.fields["remove_videos"].choices = [(path, path) for path in self.instance.videos or []]
        if self.instance.pk and not self.is_bound:
            self.initial["amenities_text"] = ", ".join(self.instance.amenities or [])

    def clean_amenities_text(self):
        raw = self.cleaned_data["amenities_text"]
        return [item.strip() for item in raw.split(",") if item.strip()]

    def clean_rooms(self):
        rooms = self.cleaned_data.get("rooms")
        return 1 if rooms in (None, "") else rooms

    def clean_status(self):
        return self.cleaned_data.get("status") or Hostel.Status.AVAILABLE

    def clean_files(self):
        files = self.cleaned_data["files"]
        max_files = getattr(settings, "MAX_UPLOAD_FILES", 10)
        if len(files) > max_files:
            raise ValidationError(f"You can upload at most {max_files} files at once.")
        for uploaded_file in files:
            validate_media_file(uploaded_file)
        return files

    def save(self, commit=True):
        hostel = super().save(commit=False)
        hostel.amenities = self.cleaned_data["amenities_text"]

        removed_images = set(self.cleaned_data.get("remove_images") or [])
        removed_videos = set(self.cleaned_data.get("remove_videos") or [])
        images = [path for path in hostel.images or [] if path not in removed_images]
        videos = [path for path in hostel.videos or [] if path not in removed_videos]

        new_images, new_videos = store_media_files(self.cleaned_data["files"])
        hostel.images = images + new_images
        hostel.videos = videos + new_videos

        if commit:
            hostel.save()
        return hostel
