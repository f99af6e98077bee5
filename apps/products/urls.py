from django.urls import path
from . import views

app_name = 'products'

product_list = views.ProductViewSet.as_view({'get': 'list'})
product_create = views.ProductViewSet.as_view({'post': 'create'})
product_detail = views.ProductViewSet.as_view({
    'get': 'retrieve',
    'put': 'update',
    'delete': 'destroy',
})
product_search = views.ProductViewSet.as_view({'get': 'search'})
product_top10 = views.ProductViewSet.as_view({'get': 'top10'})

urlpatterns = [
    # GET    /api/products              - List products
    # POST   /api/product               - Create product
    # GET    /api/product/{id}          - Get product
    # PUT    /api/product/{id}          - Update product
    # DELETE /api/product/{id}          - Delete product
    # GET    /api/product/search        - Search by name (?keyword=)
    # GET    /api/product/top10         - Best sellers
    path('products', product_list, name='product-list'),
    path('product', product_create, name='product-create'),
    path('product/search', product_search, name='product-search'),
    path('product/top10', product_top10, name='product-top10'),
    path('product/<int:pk>', product_detail, name='product-detail'),
]
