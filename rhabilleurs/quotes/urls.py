from django.urls import path
from . import views

app_name = 'quotes'

urlpatterns = [
    path('', views.quote_request, name='request'),
    path('envoye/', views.quote_success, name='success'),
]
