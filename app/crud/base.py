from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import select, desc
from pydantic import BaseModel
from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD class with club isolation via explicit club_id.

    Every read filters by club_id, and every create stamps it, so one
    club can never see or change another club's records. The club ID is
    always passed explicitly from the router layer.

    Type Parameters:
        ModelType: SQLAlchemy model class (must have club_id)
        CreateSchemaType: Pydantic schema for creating records
        UpdateSchemaType: Pydantic schema for updating records
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: int, club_id: int) -> Optional[ModelType]:
        """
        Retrieve a single record by ID with club filtering.

        Returns:
            Model instance or None if not found or owned by another club
        """
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.club_id == club_id
        )
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        club_id: int
    ) -> List[ModelType]:
        """
        Retrieve a page of the club's records, newest first.
        """
        stmt = select(self.model).where(
            self.model.club_id == club_id
        ).order_by(desc(self.model.created_at), desc(self.model.id)).offset(skip).limit(limit)
        result = db.execute(stmt)
        return list(result.scalars().all())

    def create(
        self,
        db: Session,
        *,
        obj_in: CreateSchemaType | Dict[str, Any],
        club_id: int,
        created_by: Optional[int] = None
    ) -> ModelType:
        """
        Create a new record owned by the club.

        Args:
            db: Database session
            obj_in: Pydantic schema or dict with creation data
            club_id: Owning club
            created_by: Optional ID of the user creating the record

        Returns:
            Created model instance
        """
        obj_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        if created_by is not None:
            obj_data = {**obj_data, "created_by": created_by}
        db_obj = self.model(club_id=club_id, **obj_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any]
    ) -> ModelType:
        """
        Update an existing record.

        db_obj must come from get() or a similar club-filtered lookup.
        Only fields explicitly set on a schema are written.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: int, club_id: int) -> Optional[ModelType]:
        """
        Delete a record by ID with club filtering.

        Returns:
            Deleted model instance or None if not found
        """
        obj = self.get(db=db, id=id, club_id=club_id)
        if obj:
            db.delete(obj)
            db.commit()
        return obj
