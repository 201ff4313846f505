"""Product persistence: filtered listing, aggregate report and CRUD."""
from typing import List, Tuple
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, Query, joinedload
from catalog.data.database.category_model import Category
from catalog.data.database.product_model import Product
from catalog.data.database.product_schema import (
    DEFAULT_SORT_COLUMN,
    ProductFilterParams,
    PaginationQuery,
    ProductReportItem,
    ProductReportResponse,
)
from catalog.errors import NotFoundError, StoreError


# Never order by user input directly; only these columns are sortable.
SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "stock_quantity": Product.stock_quantity,
    "created_at": Product.created_at,
    "category_id": Product.category_id,
}


def resolve_sort(sort_by: str, sort_order: str):
    """Map requested sort column/order to an ORDER BY clause, falling back to created_at desc."""
    column = SORT_COLUMNS.get(sort_by, SORT_COLUMNS[DEFAULT_SORT_COLUMN])
    if sort_order == "asc":
        return column.asc()
    return column.desc()


def apply_filters(query: Query, params: ProductFilterParams) -> Query:
    """AND together every filter that is present."""
    if params.name:
        query = query.filter(Product.name.ilike(f"%{params.name}%"))
    if params.category_id is not None:
        query = query.filter(Product.category_id == params.category_id)
    if params.price_min is not None:
        query = query.filter(Product.price >= params.price_min)
    if params.price_max is not None:
        query = query.filter(Product.price <= params.price_max)
    if params.stock_min is not None:
        query = query.filter(Product.stock_quantity >= params.stock_min)
    if params.stock_max is not None:
        query = query.filter(Product.stock_quantity <= params.stock_max)
    return query


class ProductRepository:
    """Product store bound to one request-scoped session."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Product]:
        try:
            return self.db.query(Product).options(joinedload(Product.category)).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch products: {e}") from e

    def get_all_paginated(
        self,
        params: ProductFilterParams,
        pagination: PaginationQuery
    ) -> Tuple[List[Product], int]:
        """
        Fetch one page of products matching the filters.

        Args:
            params: Filters and sort preferences
            pagination: Already-normalized page and limit

        Returns:
            Tuple of (page of products, total matching count)
        """
        filtered = apply_filters(self.db.query(Product), params)

        try:
            total = filtered.count()

            offset = (pagination.page - 1) * pagination.limit
            products = (
                filtered
                .options(joinedload(Product.category))
                .order_by(resolve_sort(params.sort_by, params.sort_order), Product.id.asc())
                .offset(offset)
                .limit(pagination.limit)
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list products: {e}") from e

        return products, total

    def get_product_report(self) -> ProductReportResponse:
        """Aggregate over the entire catalog, then list every product with its category name."""
        try:
            total_products, total_stock, average_price = self.db.query(
                func.count(Product.id),
                func.coalesce(func.sum(Product.stock_quantity), 0),
                func.coalesce(func.avg(Product.price), 0),
            ).one()

            rows = (
                self.db.query(
                    Product.id,
                    Product.name,
                    Product.price,
                    Product.stock_quantity,
                    Category.name.label("category_name"),
                )
                .outerjoin(Category, Product.category_id == Category.id)
                .order_by(Product.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to build product report: {e}") from e

        return ProductReportResponse(
            total_products=total_products,
            total_stock=int(total_stock),
            average_price=float(average_price),
            products=[
                ProductReportItem(
                    id=row.id,
                    name=row.name,
                    category_name=row.category_name,
                    price=row.price,
                    stock_quantity=row.stock_quantity,
                )
                for row in rows
            ],
        )

    def get_by_id(self, product_id: int) -> Product:
        try:
            product = (
                self.db.query(Product)
                .options(joinedload(Product.category))
                .filter(Product.id == product_id)
                .first()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to fetch product: {e}") from e

        if not product:
            raise NotFoundError(f"Product with ID {product_id} not found", {"id": product_id})
        return product

    def create(self, product: Product) -> Product:
        self.db.add(product)
        self._commit("create")
        self.db.refresh(product)
        return product

    def edit(self, product: Product) -> Product:
        self.db.add(product)
        self._commit("edit")
        self.db.refresh(product)
        return product

    def delete(self, product_id: int) -> None:
        try:
            deleted = self.db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to delete product: {e}") from e

        if not deleted:
            self.db.rollback()
            raise NotFoundError(f"Product with ID {product_id} not found", {"id": product_id})
        self._commit("delete")

    def _commit(self, operation: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to {operation} product: {e}") from e
