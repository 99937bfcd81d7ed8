"""SQLAlchemy-backed recipe storage.

A single `recipes` table; list-valued fields and dietary flags are stored in
JSON columns. The table is created on startup.
"""

from typing import Optional

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text, create_engine, select
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from recipe_suggester.models.models import NewRecipe, Recipe
from recipe_suggester.storage.base import RecipeNotFoundError, RecipeStorage
from recipe_suggester.utils.logger import logger

Base = declarative_base()


class RecipeRow(Base):
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    ingredients = Column(JSON, nullable=False)
    instructions = Column(JSON, nullable=False)
    cuisine = Column(String(50), nullable=False)
    calories = Column(Integer, nullable=False)
    cook_time = Column(String(50), nullable=False)
    image_url = Column(Text, nullable=False)
    chef_note = Column(Text)
    dietary_flags = Column(JSON, nullable=False)
    saved = Column(Boolean, nullable=False, default=False)

    def to_model(self) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            description=self.description,
            ingredients=self.ingredients,
            instructions=self.instructions,
            cuisine=self.cuisine,
            calories=self.calories,
            cook_time=self.cook_time,
            image_url=self.image_url,
            chef_note=self.chef_note,
            dietary_flags=self.dietary_flags,
            saved=self.saved,
        )


def create_db_engine(database_url: str):
    """Create an engine; SQLite URLs are made usable from FastAPI's worker threads."""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)
    return create_engine(database_url, pool_pre_ping=True)


class SqlRecipeStorage(RecipeStorage):
    """Relational storage for recipes.

    Args:
        database_url: SQLAlchemy URL, e.g. "sqlite:///recipes.db" or a PostgreSQL URL.
    """

    def __init__(self, database_url: str) -> None:
        self.engine = create_db_engine(database_url)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        self.init_db()

    def init_db(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def create_recipe(self, draft: NewRecipe) -> Recipe:
        values = draft.model_dump()
        with self.SessionLocal() as db:
            row = RecipeRow(saved=False, **values)
            db.add(row)
            db.commit()
            return row.to_model()

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        with self.SessionLocal() as db:
            row = db.get(RecipeRow, recipe_id)
            return row.to_model() if row else None

    def list_recipes(self) -> list[Recipe]:
        with self.SessionLocal() as db:
            rows = db.scalars(select(RecipeRow).order_by(RecipeRow.id)).all()
            return [row.to_model() for row in rows]

    def get_saved_recipes(self) -> list[Recipe]:
        with self.SessionLocal() as db:
            rows = db.scalars(select(RecipeRow).where(RecipeRow.saved.is_(True)).order_by(RecipeRow.id)).all()
            return [row.to_model() for row in rows]

    def save_recipe(self, recipe_id: int) -> Recipe:
        with self.SessionLocal() as db:
            row = db.get(RecipeRow, recipe_id)
            if row is None:
                raise RecipeNotFoundError(recipe_id)
            row.saved = True
            db.commit()
            return row.to_model()

    def remove_saved_recipe(self, recipe_id: int) -> None:
        with self.SessionLocal() as db:
            row = db.get(RecipeRow, recipe_id)
            if row is None or not row.saved:
                return
            row.saved = False
            db.commit()
            logger.debug(f"Recipe {recipe_id} removed from saved")
