"""SQLAlchemy models for the content tables.

Defines categories, products, articles, comments and users, plus
conversions to and from the frozen domain entities.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coolstff.domain.entities import AffiliateLink, Article, Category, Comment, Product, User
from coolstff.infrastructure.database import Base


def _aware(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CategoryModel(Base):
    """Category row."""

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")

    def __repr__(self) -> str:
        """String representation."""
        return f"<CategoryModel(id={self.id}, slug={self.slug})>"

    def to_entity(self) -> Category:
        """Convert to domain entity."""
        return Category(
            id=self.id,
            name=self.name,
            slug=self.slug,
            description=self.description,
            image_url=self.image_url,
        )

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryModel":
        """Build a row from a domain entity."""
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
        )


class ProductModel(Base):
    """Product row.

    Images and affiliate links are stored as JSON arrays, mirroring the
    document shape the admin console writes.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # No foreign key: products may reference a deleted category.
    category_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    affiliate_links: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(id={self.id}, title={self.title[:30]})>"

    def to_entity(self) -> Product:
        """Convert to domain entity."""
        return Product(
            id=self.id,
            title=self.title,
            description=self.description,
            price=self.price,
            images=tuple(self.images),
            category_id=self.category_id,
            affiliate_links=tuple(AffiliateLink(**link) for link in self.affiliate_links),
            featured=self.featured,
            rating=self.rating,
            review_count=self.review_count,
            created_at=_aware(self.created_at),
            updated_at=_aware(self.updated_at),
        )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductModel":
        """Build a row from a domain entity."""
        return cls(
            id=product.id,
            title=product.title,
            description=product.description,
            price=product.price,
            images=list(product.images),
            category_id=product.category_id,
            affiliate_links=[
                {"id": link.id, "store": link.store.value, "url": link.url, "price": link.price}
                for link in product.affiliate_links
            ],
            featured=product.featured,
            rating=product.rating,
            review_count=product.review_count,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ArticleModel(Base):
    """Article row."""

    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False, default="")
    cover_image: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    category_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    source: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    source_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_entity(self) -> Article:
        """Convert to domain entity."""
        return Article(
            id=self.id,
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            cover_image=self.cover_image,
            category_id=self.category_id,
            featured=self.featured,
            source=self.source,
            source_url=self.source_url,
            created_at=_aware(self.created_at),
            updated_at=_aware(self.updated_at),
        )

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleModel":
        """Build a row from a domain entity."""
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            excerpt=article.excerpt,
            cover_image=article.cover_image,
            category_id=article.category_id,
            featured=article.featured,
            source=article.source,
            source_url=article.source_url,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class CommentModel(Base):
    """Comment row, keyed to a product or article by (content_id, content_type)."""

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(String(200), nullable=False)
    content_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    content_type: Mapped[str] = mapped_column(String(20), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_entity(self) -> Comment:
        """Convert to domain entity."""
        return Comment(
            id=self.id,
            user_id=self.user_id,
            user_name=self.user_name,
            content_id=self.content_id,
            content_type=self.content_type,
            text=self.text,
            created_at=_aware(self.created_at),
        )


class UserModel(Base):
    """User row with favorites stored as a JSON array of product ids."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    favorites: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_entity(self) -> User:
        """Convert to domain entity."""
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            is_admin=self.is_admin,
            favorites=frozenset(self.favorites),
            created_at=_aware(self.created_at),
        )

    @classmethod
    def from_entity(cls, user: User) -> "UserModel":
        """Build a row from a domain entity."""
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            is_admin=user.is_admin,
            favorites=sorted(user.favorites),
            created_at=user.created_at,
        )
