# app_customer_interface/admin.py
from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('short_id', 'restaurant', 'dish', 'quantity', 'table_number', 'status', 'created_at', 'line_total')
    list_filter = ('restaurant', 'status', 'created_at')
    search_fields = ('id', 'restaurant__name', 'dish__name', 'table_number', 'customer_notes')
    readonly_fields = ('id', 'created_at', 'line_total')

    fieldsets = (
        ('Order Information', {
            'fields': (
                'id',
                'restaurant',
                'dish',
                'quantity',
                'status',
                'created_at',
                'line_total',
            ),
        }),
        ('Table', {
            'fields': ('table_number',),
        }),
        ('Customer Notes', {
            'fields': ('customer_notes',),
            'classes': ('collapse',),
        }),
    )

    def short_id(self, obj):
        return obj.short_id

    short_id.short_description = 'Order ID'
