from django.urls import path
from . import views
urlpatterns=[
    path('', views.home, name='home'),
    path('boutique/', views.boutique, name='boutique'),
    path('boutique/filtre/', views.boutique_filter, name='boutique_filter'),
    path('boutique/<str:watch_id>/', views.watch_detail, name='watch_detail'),
    path('galerie/', views.gallery, name='gallery'),
    path('robots.txt', views.robots_txt, name='robots_txt'),
]
