# app_owner_admin_panel/forms.py
from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.models import User

from app_customer_interface.models import Order
from .models import Restaurant, Dish


class LoginForm(forms.Form):
    username = forms.CharField(label='Username', max_length=150, required=True)
    password = forms.CharField(label='Password', widget=forms.PasswordInput, required=True)


class SignUpForm(UserCreationForm):
    email = forms.EmailField(required=True)
    full_name = forms.CharField(label='Full name', max_length=150, required=True)

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('username', 'email')

    def save(self, commit=True):
        user = super().save(commit=commit)
        if commit:
            user.profile.full_name = self.cleaned_data['full_name']
            user.profile.save(update_fields=['full_name'])
        return user


class RestaurantForm(forms.ModelForm):
    class Meta:
        model = Restaurant
        fields = ('name', 'location')


class DishForm(forms.ModelForm):
    class Meta:
        model = Dish
        fields = (
            'name', 'description', 'price', 'ingredients', 'calories', 'protein',
            'image_url', 'model_url', 'model_file', 'preparation_time_minutes', 'availability',
        )
        widgets = {
            'description': forms.Textarea(attrs={'rows': 3}),
            'ingredients': forms.Textarea(attrs={'rows': 2}),
        }

    def clean_price(self):
        price = self.cleaned_data['price']
        if price is not None and price <= 0:
            raise forms.ValidationError("Price must be greater than zero")
        return price


class OrderStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Order.STATUS_CHOICES)
