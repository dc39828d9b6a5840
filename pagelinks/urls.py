from django.urls import path
from pagelinks.views import NumbersView

app_name = 'pagelinks'

urlpatterns = [
    path('numbers/', NumbersView.as_view(), name='numbers'),
]
