"""SQLAlchemy models for the product catalog.

Defines Category, Product and ProductVariant tables for persistent storage.
The same classes are used as plain entities when instantiated without a
session, which is how the in-memory repositories build their data.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base


class Category(Base):
    """Product category.

    Categories do not own their products: deleting a category is not
    cascaded to the products that reference it.

    Attributes:
        id: Unique category identifier.
        code: Externally visible code (unique, immutable once created).
        name: Display name.
        products: Products referencing this category.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        order_by="Product.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, code={self.code})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier.
        code: Externally visible product code (e.g., "PROD001").
        price: Exact decimal price.
        category_id: Owning category.
        category: Category the product belongs to.
        variants: Ordered variants owned by this product.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    category: Mapped[Category | None] = relationship(
        "Category",
        back_populates="products",
    )
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.code})>"

    @classmethod
    def blank(cls) -> "Product":
        """Create a zero-valued product.

        Stands in for a lookup that matched nothing: empty code, zero price,
        no category and no variants.

        Returns:
            Transient Product with every field at its zero value.
        """
        return cls(code="", price=Decimal("0"), variants=[])


class ProductVariant(Base):
    """Product variant (e.g., a size of a garment).

    A stored price of exactly zero means "use the parent product price".

    Attributes:
        id: Unique variant identifier.
        product_id: Parent product ID.
        name: Variant name (e.g., "Medium").
        sku: Stock Keeping Unit (unique).
        price: Own price, or zero to inherit the product price.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0"),
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductVariant(id={self.id}, sku={self.sku})>"

    @property
    def inherits_price(self) -> bool:
        """Whether this variant takes its price from the parent product."""
        return self.price is None or self.price == 0

    def resolve_price(self, parent_price: Decimal) -> Decimal:
        """Get the effective price of this variant.

        Args:
            parent_price: Price of the owning product.

        Returns:
            The parent price when inheriting, the variant's own price otherwise.
        """
        if self.inherits_price:
            return parent_price
        return self.price
