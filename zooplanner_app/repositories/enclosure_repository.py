"""
Repository for enclosures and the animal batches already living in them.
"""

from __future__ import annotations

import json
from typing import List, Optional

from sqlalchemy import Integer, String, Text, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, Session

from .database import Base
from ..config.rules import KNOWN_HABITATS
from ..models.enclosure_definition import EnclosureDefinition


class EnclosureORM(Base):
    __tablename__ = "enclosures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    habitats_json: Mapped[str] = mapped_column(Text, default="[]")
    total_capacity: Mapped[int] = mapped_column(Integer, nullable=False)


class ResidentBatchORM(Base):
    __tablename__ = "resident_batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    enclosure_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("enclosures.id"), nullable=False
    )
    species_id: Mapped[str] = mapped_column(String(64), nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0)  # admission order


class EnclosureRepository:
    """Repository for CRUD operations on enclosures."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def _parse_habitats(self, json_str: str) -> List[str]:
        try:
            if not json_str:
                return []
            data = json.loads(json_str)
            if not isinstance(data, list):
                return []
            return [str(h) for h in data]
        except (json.JSONDecodeError, TypeError, ValueError):
            return []

    def _serialize_habitats(self, habitats: List[str]) -> str:
        return json.dumps(sorted(set(habitats)))

    def _residents_for(self, enclosure_id: int) -> List[tuple[str, int]]:
        rows = (
            self._db.query(ResidentBatchORM)
            .filter(ResidentBatchORM.enclosure_id == enclosure_id)
            .order_by(ResidentBatchORM.position, ResidentBatchORM.id)
            .all()
        )
        return [(r.species_id, r.count) for r in rows]

    def _to_model(self, obj: EnclosureORM) -> EnclosureDefinition:
        return EnclosureDefinition(
            id=obj.id,
            habitats=self._parse_habitats(obj.habitats_json),
            total_capacity=obj.total_capacity,
            residents=self._residents_for(obj.id),
        )

    def create(self, definition: EnclosureDefinition) -> EnclosureDefinition:
        if definition.total_capacity <= 0:
            raise ValueError("EnclosureDefinition.total_capacity must be positive")
        unknown = set(definition.habitats) - KNOWN_HABITATS
        if unknown:
            raise ValueError(f"Unknown habitats: {sorted(unknown)}")
        obj = EnclosureORM(
            habitats_json=self._serialize_habitats(definition.habitats),
            total_capacity=definition.total_capacity,
        )
        if definition.id is not None:
            obj.id = definition.id
        self._db.add(obj)
        self._db.flush()
        for position, (species_id, count) in enumerate(definition.residents):
            self._db.add(ResidentBatchORM(
                enclosure_id=obj.id,
                species_id=species_id,
                count=count,
                position=position,
            ))
        self._db.commit()
        self._db.refresh(obj)
        definition.id = obj.id
        return definition

    def get(self, enclosure_id: int) -> Optional[EnclosureDefinition]:
        obj = self._db.get(EnclosureORM, enclosure_id)
        if not obj:
            return None
        return self._to_model(obj)

    def list(self) -> List[EnclosureDefinition]:
        return [
            self._to_model(obj)
            for obj in self._db.query(EnclosureORM).order_by(EnclosureORM.id).all()
        ]

    def count(self) -> int:
        return self._db.query(func.count(EnclosureORM.id)).scalar() or 0

    def add_resident(self, enclosure_id: int, species_id: str, count: int) -> None:
        if self._db.get(EnclosureORM, enclosure_id) is None:
            raise ValueError(f"Enclosure with id {enclosure_id} not found")
        last = (
            self._db.query(func.max(ResidentBatchORM.position))
            .filter(ResidentBatchORM.enclosure_id == enclosure_id)
            .scalar()
        )
        self._db.add(ResidentBatchORM(
            enclosure_id=enclosure_id,
            species_id=species_id,
            count=count,
            position=0 if last is None else last + 1,
        ))
        self._db.commit()

    def delete(self, enclosure_id: int) -> None:
        obj = self._db.get(EnclosureORM, enclosure_id)
        if obj is None:
            return
        self._db.query(ResidentBatchORM).filter(
            ResidentBatchORM.enclosure_id == enclosure_id
        ).delete()
        self._db.delete(obj)
        self._db.commit()
