from django.urls import path
from . import views

app_name = 'boards'

urlpatterns = [
    # GET    /api/boards/?page=&per_page=  - Paged list, newest first
    # POST   /api/boards/                  - Create board (multipart, image required)
    path('', views.board_list, name='board-list'),
    # GET    /api/boards/search/?value=    - Boards in a region
    path('search/', views.board_search, name='board-search'),
    # GET    /api/boards/{id}/             - Board with comments
    # PATCH  /api/boards/{id}/             - Partial update (owner only)
    # DELETE /api/boards/{id}/             - Delete (owner only)
    path('<uuid:board_id>/', views.board_detail, name='board-detail'),
    # POST   /api/boards/{id}/comments/    - Comment on a board
    path('<uuid:board_id>/comments/', views.comment_create, name='comment-create'),
]
