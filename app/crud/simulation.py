# crud/simulation.py
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.crud.base import commit
from app.engine.domains import Domain
from app.models.simulation import Simulation


class CRUDSimulation:
    """CRUD operations for Simulation model."""

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(
        self,
        db: Session,
        *,
        user_id: UUID,
        domain: Domain,
        projection: Dict[str, Any],
        timeline: str = "30days",
    ) -> Simulation:
        """
        Store a generated insight.

        Args:
            db: Database session
            user_id: Owner UUID
            domain: Domain the insight covers
            projection: JSON-ready projection object
            timeline: Horizon label

        Returns:
            Created Simulation instance
        """
        db_obj = Simulation(
            user_id=user_id,
            domain=domain.value,
            timeline=timeline,
            projection=projection,
        )

        db.add(db_obj)
        commit(db)
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_for_user(self, db: Session, *, id: UUID, user_id: UUID) -> Optional[Simulation]:
        """Get a simulation by ID, only if it belongs to `user_id`."""
        return (
            db.query(Simulation)
            .filter(Simulation.id == id, Simulation.user_id == user_id)
            .first()
        )

    def get_by_user_id(self, db: Session, user_id: UUID) -> List[Simulation]:
        """
        Get all simulations of a user, newest first.

        Args:
            db: Database session
            user_id: User UUID

        Returns:
            List of Simulation instances
        """
        return (
            db.query(Simulation)
            .filter(Simulation.user_id == user_id)
            .order_by(Simulation.generated_at.desc())
            .all()
        )

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete(self, db: Session, *, db_obj: Simulation) -> Simulation:
        """Delete one simulation."""
        db.delete(db_obj)
        commit(db)
        return db_obj

    def delete_by_user_id(self, db: Session, *, user_id: UUID) -> int:
        """
        Delete every simulation of a user.

        Returns:
            Number of rows deleted
        """
        deleted = (
            db.query(Simulation)
            .filter(Simulation.user_id == user_id)
            .delete(synchronize_session=False)
        )
        commit(db)
        return deleted


# Create singleton instance
crud_simulation = CRUDSimulation()
