# app_owner_admin_panel/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.models import User
from .models import Restaurant, Dish, Profile


class RestaurantAdmin(admin.ModelAdmin):
    list_display = ('name', 'location', 'owner', 'created_at')
    search_fields = ('name', 'location', 'owner__username')
    readonly_fields = ('id', 'created_at')


class DishAdmin(admin.ModelAdmin):
    list_display = ('name', 'price', 'availability', 'preparation_time_minutes', 'restaurant', 'has_3d_model')
    list_filter = ('restaurant__name', 'availability')
    search_fields = ('name', 'description', 'ingredients')
    readonly_fields = ('id', 'created_at')

    def has_3d_model(self, obj):
        return obj.has_3d_model

    has_3d_model.boolean = True
    has_3d_model.short_description = '3D model'


class ProfileAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'user', 'created_at')
    search_fields = ('full_name', 'user__username', 'user__email')


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'


class CustomUserAdmin(UserAdmin):
    inlines = (ProfileInline,)

    list_display = ('username', 'email', 'get_full_name', 'is_staff', 'is_superuser', 'restaurant_count')
    list_filter = ('is_staff', 'is_superuser', 'groups')
    search_fields = ('username', 'email', 'profile__full_name', 'restaurants__name')

    def get_full_name(self, obj):
        return obj.profile.full_name if hasattr(obj, 'profile') else ''

    def restaurant_count(self, obj):
        return obj.restaurants.count()

    get_full_name.short_description = 'Full name'
    restaurant_count.short_description = 'Restaurants'


admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)
admin.site.register(Restaurant, RestaurantAdmin)
admin.site.register(Dish, DishAdmin)
admin.site.register(Profile, ProfileAdmin)
