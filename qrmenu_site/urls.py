from django.contrib import admin
from django.urls import path, include
from app_owner_admin_panel.views import login_view
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),
    path('auth/login/', login_view, name='login'),
    path('', include('app_owner_admin_panel.urls')),
    path('', include('app_customer_interface.urls')),
    path('admin-panel/', include('app_platform_admin.urls')),
]

# Serve uploaded 3D models during development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
