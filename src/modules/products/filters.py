import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    category = django_filters.CharFilter(field_name="category", lookup_expr="exact")
    inStock = django_filters.BooleanFilter(field_name="in_stock")

    class Meta:
        model = Product
        fields = ["name", "category", "inStock"]
