# app_customer_interface/forms.py
from django import forms


class CheckoutForm(forms.Form):
    # Left as raw text: the checkout itself decides what a usable table number is
    table_number = forms.CharField(required=False)
    customer_notes = forms.CharField(widget=forms.Textarea(attrs={'rows': 3}), required=False, strip=False)
