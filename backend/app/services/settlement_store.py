"""
Storage interface used by the settlement engine.

The engine only needs a handful of reads and writes; keeping them behind
``SettlementStore`` lets the calculation run over any backend.
"""
from typing import List, Protocol
from sqlalchemy.orm import Session
from app.models.project import Project
from app.models.partner import Partner
from app.models.transaction import Transaction
from app.models.settlement import Settlement, SettlementRun


class SettlementStore(Protocol):
    """Reads and writes needed to run a settlement."""
    
    def project_exists(self, project_id: int) -> bool: ...
    
    def list_partners_by_project(self, project_id: int) -> List[Partner]: ...
    
    def list_transactions_by_project_and_partner(
        self, project_id: int, partner_id: int, include_settled: bool = False
    ) -> List[Transaction]: ...
    
    def save_run(self, run: SettlementRun) -> SettlementRun: ...
    
    def save_settlement(self, settlement: Settlement) -> Settlement: ...
    
    def commit(self) -> None: ...
    
    def rollback(self) -> None: ...
    
    def refresh(self, instance) -> None: ...


class SqlSettlementStore:
    """SQLAlchemy-backed settlement store sharing the request session."""
    
    def __init__(self, db: Session):
        self.db = db
    
    def project_exists(self, project_id: int) -> bool:
        return self.db.query(Project.id).filter(Project.id == project_id).first() is not None
    
    def list_partners_by_project(self, project_id: int) -> List[Partner]:
        return self.db.query(Partner).filter(
            Partner.project_id == project_id
        ).order_by(Partner.id).all()
    
    def list_transactions_by_project_and_partner(
        self, project_id: int, partner_id: int, include_settled: bool = False
    ) -> List[Transaction]:
        query = self.db.query(Transaction).filter(
            Transaction.linked_project_id == project_id,
            Transaction.linked_partner_id == partner_id
        )
        if not include_settled:
            query = query.filter(Transaction.settlement_run_id.is_(None))
        return query.order_by(Transaction.id).all()
    
    def save_run(self, run: SettlementRun) -> SettlementRun:
        self.db.add(run)
        self.db.flush()
        return run
    
    def save_settlement(self, settlement: Settlement) -> Settlement:
        self.db.add(settlement)
        self.db.flush()
        return settlement
    
    def commit(self) -> None:
        self.db.commit()
    
    def rollback(self) -> None:
        self.db.rollback()
    
    def refresh(self, instance) -> None:
        self.db.refresh(instance)
