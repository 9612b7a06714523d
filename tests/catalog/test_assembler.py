"""Tests for catalog response assembly."""

from decimal import Decimal

from catalog_api.catalog.assembler import prepare_response, product_to_schema
from catalog_api.catalog.memory import InMemoryCatalog
from catalog_api.catalog.models import Category, Product, ProductVariant


def make_product(code: str, price: str, variant_prices: list[str]) -> Product:
    return Product(
        code=code,
        price=Decimal(price),
        category=Category(code="clothing", name="Clothing"),
        variants=[
            ProductVariant(name=f"V{i}", sku=f"{code}-{i}", price=Decimal(p))
            for i, p in enumerate(variant_prices)
        ],
    )


class TestPrepareResponse:
    """Tests for prepare_response."""

    def test_counts_variants_across_products(self) -> None:
        """products_available sums variants of every product."""
        products = [
            make_product("PROD001", "10.00", ["11.00"]),
            make_product("PROD002", "20.00", ["0", "21.00"]),
            make_product("PROD003", "30.00", []),
        ]

        response = prepare_response(products)

        assert [p.code for p in response.products] == ["PROD001", "PROD002", "PROD003"]
        assert response.products_available == 3
        assert response.variants is None

    def test_no_variants_counts_zero(self) -> None:
        products = [make_product("PROD001", "10.00", []), make_product("PROD002", "5.00", [])]
        assert prepare_response(products).products_available == 0

    def test_empty_products(self) -> None:
        response = prepare_response([], include_variants=True)
        assert response.products == []
        assert response.products_available == 0
        assert response.variants is None

    def test_price_inheritance(self) -> None:
        """Zero-priced variants take the parent price; others keep theirs."""
        product = make_product("PROD007", "100.50", ["0", "120.00"])
        product.id = 7

        response = prepare_response([product], include_variants=True)

        assert [v.price for v in response.variants] == [100.5, 120.0]
        assert response.products_available == 2

    def test_only_first_products_variants_emitted(self) -> None:
        """Variants are emitted for the first product only, but all are counted."""
        catalog = InMemoryCatalog(
            products=[
                make_product("PROD001", "10.00", ["0"]),
                make_product("PROD002", "20.00", ["0", "0"]),
            ]
        )

        response = prepare_response(catalog.products, include_variants=True)

        assert response.products_available == 3
        assert len(response.variants) == 1
        assert response.variants[0].sku == "PROD001-0"
        assert response.variants[0].price == 10.0
        assert response.variants[0].product_id == catalog.products[0].id

    def test_include_variants_without_variants_is_empty_list(self) -> None:
        response = prepare_response([make_product("PROD004", "15.00", [])], include_variants=True)
        assert response.variants == []

    def test_variants_serialize_with_product_id_alias(self) -> None:
        catalog = InMemoryCatalog(products=[make_product("PROD001", "10.00", ["0"])])

        data = prepare_response(catalog.products, include_variants=True).model_dump(
            by_alias=True
        )

        assert data["variants"][0]["productId"] == 1
        assert "product_id" not in data["variants"][0]

    def test_blank_product(self) -> None:
        """A zero-valued product renders with zero-valued fields."""
        response = prepare_response([Product.blank()], include_variants=True)

        assert response.products[0].model_dump() == {"code": "", "price": 0.0, "category": ""}
        assert response.products_available == 0
        assert response.variants == []


class TestProductToSchema:
    """Tests for product_to_schema."""

    def test_product_without_category(self) -> None:
        product = Product(code="PROD010", price=Decimal("3.50"), variants=[])
        schema = product_to_schema(product)
        assert schema.category == ""
        assert schema.price == 3.5
