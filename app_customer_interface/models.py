# In app_customer_interface/models.py
import uuid

from django.core.validators import MinValueValidator
from django.db import models

from app_owner_admin_panel.models import Restaurant, Dish


class Order(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_PREPARING = 'preparing'
    STATUS_READY = 'ready'
    STATUS_COMPLETED = 'completed'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'pending'),
        (STATUS_CONFIRMED, 'confirmed'),
        (STATUS_PREPARING, 'preparing'),
        (STATUS_READY, 'ready'),
        (STATUS_COMPLETED, 'completed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name='orders')
    # Orders outlive the dish they were placed for
    dish = models.ForeignKey(Dish, on_delete=models.SET_NULL, null=True, related_name='orders')
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    table_number = models.PositiveIntegerField()
    customer_notes = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        dish_name = self.dish.name if self.dish else 'Removed dish'
        return f"{dish_name} (x{self.quantity}) - table {self.table_number} - {self.status}"

    @property
    def line_total(self):
        if self.dish is None:
            return 0
        return self.dish.price * self.quantity

    @property
    def short_id(self):
        return str(self.id)[:8]
