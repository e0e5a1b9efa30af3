# In app_owner_admin_panel/models.py

import os
import uuid

from django.conf import settings
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.core.validators import FileExtensionValidator, MinValueValidator
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver


class Profile(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=150, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'profiles'
        ordering = ['-created_at']

    def __str__(self):
        return self.full_name or self.user.username


@receiver(post_save, sender=User)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    # Every registered user gets a profile row
    if created:
        Profile.objects.get_or_create(
            user=instance,
            defaults={'full_name': instance.get_full_name()},
        )


class Restaurant(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    location = models.CharField(max_length=200, blank=True)
    owner = models.ForeignKey(User, on_delete=models.CASCADE, related_name='restaurants')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'restaurants'
        ordering = ['name']

    def __str__(self):
        return self.name


def validate_model_size(upload):
    limit = settings.MODEL_UPLOAD_MAX_BYTES
    if upload.size > limit:
        raise ValidationError(
            f"File size too large. Please upload files smaller than {limit // (1024 * 1024)}MB."
        )


def dish_model_upload_to(instance, filename):
    ext = os.path.splitext(filename)[1].lower()
    return f'dish-assets/{instance.restaurant_id}/{instance.id}{ext}'


class Dish(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name='dishes')
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])
    image_url = models.URLField(max_length=500, blank=True, null=True)
    model_url = models.URLField(max_length=500, blank=True, null=True)
    model_file = models.FileField(
        upload_to=dish_model_upload_to,
        blank=True,
        null=True,
        validators=[
            FileExtensionValidator(allowed_extensions=settings.MODEL_UPLOAD_EXTENSIONS),
            validate_model_size,
        ],
        help_text=".glb or .gltf 3D model",
    )
    ingredients = models.TextField(blank=True, null=True)
    calories = models.PositiveIntegerField(blank=True, null=True)
    protein = models.DecimalField(max_digits=6, decimal_places=1, blank=True, null=True)
    availability = models.BooleanField(default=True)
    preparation_time_minutes = models.PositiveIntegerField(default=15)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'dishes'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def preview_model_url(self):
        """Uploaded model wins over a pasted URL."""
        if self.model_file:
            return self.model_file.url
        return self.model_url or ''

    @property
    def has_3d_model(self):
        return bool(self.model_file or self.model_url)

    def delete(self, *args, **kwargs):
        stored_file = self.model_file
        super().delete(*args, **kwargs)
        if stored_file:
            stored_file.delete(save=False)
