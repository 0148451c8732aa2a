from rest_framework import routers
from django.urls import path, include
from .views import DashboardViewSet, DayProblemViewSet

router = routers.DefaultRouter()
router.register(r'challenges', DayProblemViewSet, basename='challenges')
router.register(r'dashboard', DashboardViewSet, basename='dashboard')

urlpatterns = [
    path('', include(router.urls)),
]
