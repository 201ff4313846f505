"""Print the CREATE TABLE statements for the catalog models.

Usage:
    python -m catalog.data.database.schema > schema.sql
"""
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable
from catalog.data.database.connection import Base
from catalog.data.database import Category, Product, User  # noqa: F401


def render_schema(dialect=None) -> str:
    """Render DDL for every mapped table, in dependency order."""
    dialect = dialect or postgresql.dialect()
    statements = []
    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda i: i.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")
    return "\n\n".join(statements) + "\n"


def main():
    print(render_schema(), end="")


if __name__ == "__main__":
    main()
