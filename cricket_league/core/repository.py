import logging
from typing import Any, Dict, Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from cricket_league.core.exceptions import (
    ConcurrencyConflictError,
    ConflictError,
    NotFoundError,
    RestrictedDeleteError,
)

logger = logging.getLogger(__name__)

# Largest value a SQLite INTEGER (signed 64-bit) can bind
MAX_ID = 2 ** 63 - 1


def valid_id(entity_id) -> bool:
    """Ids outside the storable range can never match a row."""
    return entity_id is not None and 1 <= entity_id <= MAX_ID


class Repository:
    """Typed access to one table through a request-scoped session.

    Relations are never loaded implicitly for projections: callers name the
    ones they need in ``include`` and they are eager-loaded with the rows.
    Every table carries a ``version`` column which ``update`` compares
    against the version the caller read.
    """

    def __init__(self, db: Session, model, id_field: str, label: str):
        self.db = db
        self.model = model
        self.id_field = id_field
        self.label = label

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    def _load_options(self, include: Iterable[str]):
        options = []
        for name in include:
            attribute = getattr(self.model, name, None)
            if attribute is None or not hasattr(attribute, "property"):
                raise ValueError(f"{self.model.__name__} has no relation named '{name}'")
            # Collections load in a second SELECT ... IN, references are joined
            if attribute.property.uselist:
                options.append(selectinload(attribute))
            else:
                options.append(joinedload(attribute))
        return options

    def list(self, include: Iterable[str] = ()) -> List[Any]:
        return (
            self.db.query(self.model)
            .options(*self._load_options(include))
            .order_by(self.id_column)
            .all()
        )

    def find(self, entity_id, include: Iterable[str] = ()):
        if not valid_id(entity_id):
            return None
        return (
            self.db.query(self.model)
            .options(*self._load_options(include))
            .filter(self.id_column == entity_id)
            .first()
        )

    def get_by_id(self, entity_id, include: Iterable[str] = ()):
        entity = self.find(entity_id, include)
        if entity is None:
            raise NotFoundError.for_entity(self.label, entity_id)
        return entity

    def exists(self, entity_id) -> bool:
        if not valid_id(entity_id):
            return False
        query = self.db.query(self.id_column).filter(self.id_column == entity_id)
        return self.db.query(query.exists()).scalar()

    def insert(self, values: Dict[str, Any]):
        entity = self.model(**values)
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Insert into {self.model.__tablename__} refused: {e.orig}")
            raise ConflictError(f"{self.label} violates a database constraint.") from e
        self.db.refresh(entity)
        return entity

    def update(self, entity_id, values: Dict[str, Any], expected_version: int):
        """Write ``values`` only if the row still has ``expected_version``."""
        if not valid_id(entity_id):
            raise ConcurrencyConflictError(
                f"{self.label} with ID {entity_id} was changed or removed by another request."
            )
        try:
            matched = (
                self.db.query(self.model)
                .filter(self.id_column == entity_id, self.model.version == expected_version)
                .update({**values, "version": expected_version + 1}, synchronize_session=False)
            )
            if matched == 0:
                self.db.rollback()
                raise ConcurrencyConflictError(
                    f"{self.label} with ID {entity_id} was changed or removed by another request."
                )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Update of {self.model.__tablename__} {entity_id} refused: {e.orig}")
            raise ConflictError(f"{self.label} violates a database constraint.") from e
        return self.get_by_id(entity_id)

    def delete(self, entity_id):
        if not valid_id(entity_id):
            raise NotFoundError.for_entity(self.label, entity_id)
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.id_column == entity_id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                self.db.rollback()
                raise NotFoundError.for_entity(self.label, entity_id)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise RestrictedDeleteError(
                f"{self.label} with ID {entity_id} is still referenced and cannot be deleted."
            ) from e
        # Bulk deletes bypass the identity map
        self.db.expire_all()
