from django.urls import path
from . import views
from apps.reviews import views as review_views

app_name = 'stores'

urlpatterns = [
    # GET  /api/stores/{id}/          - Store detail with star rating
    path('<uuid:store_id>/', views.store_detail, name='store-detail'),
    # POST /api/stores/{id}/reviews/  - Review the store
    path('<uuid:store_id>/reviews/', review_views.create_review, name='store-reviews'),
]
