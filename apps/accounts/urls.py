from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('login', views.login, name='login'),
    path('logout', views.logout, name='logout'),
    path('register', views.register, name='register'),

    # Session
    path('me', views.get_current_user, name='current-user'),
]
