from django.contrib import admin
from django.urls import path, include
from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi
from django.conf import settings
from django.conf.urls.static import static

api_urlpatterns = [
    path('Onboarding/', include('Onboarding.urls')),
    path('DailyChallenges/', include('DailyChallenges.urls')),
]

schema_view = get_schema_view(
    openapi.Info(
        title="SIHPrep API",
        default_version="v1",
        description="Daily hackathon preparation challenges, submissions and leaderboard",
        license=openapi.License(name="SIHPrep License"),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include(api_urlpatterns)),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
]

# Serve uploaded submissions in DEBUG mode
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
