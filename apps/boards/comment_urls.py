from django.urls import path
from . import views

app_name = 'comments'

urlpatterns = [
    # GET    /api/comments/{id}/  - Get comment
    # DELETE /api/comments/{id}/  - Delete comment (author only)
    path('<uuid:comment_id>/', views.comment_detail, name='comment-detail'),
]
