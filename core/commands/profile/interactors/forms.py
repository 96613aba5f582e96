from django import forms
from django.utils import timezone

MIN_YEAR_OF_BIRTH = 1900


class YearOfBirthForm(forms.Form):
    """
    `year_of_birth` must be a whole number between 1900 and the current year.
    Booleans and fractional numbers are rejected as "Enter a whole number."
    """

    def __init__(self, *args, required=True, **kwargs):
        super().__init__(*args, **kwargs)
        # the upper bound moves with the calendar, so build the field per form
        self.max_year = timezone.now().year
        self.fields["year_of_birth"] = forms.IntegerField(
            required=required,
            min_value=MIN_YEAR_OF_BIRTH,
            max_value=self.max_year,
        )

    @property
    def error_message(self) -> str:
        return (
            f"yearOfBirth must be an integer between "
            f"{MIN_YEAR_OF_BIRTH} and {self.max_year}"
        )
