from django.urls import path
from . import views

app_name = 'reviews'

urlpatterns = [
    # GET    /api/reviews/{id}/  - Get review (null body when absent)
    # PATCH  /api/reviews/{id}/  - Edit grade/content (author only)
    # DELETE /api/reviews/{id}/  - Delete review (author only)
    path('<uuid:review_id>/', views.review_detail, name='review-detail'),
]
