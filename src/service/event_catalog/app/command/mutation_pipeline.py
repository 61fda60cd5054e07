"""
Ordered validation for create/update mutations.

Stages, in order:
1. check_required_fields  -> ValidationError
2. resolve_references     -> NotFoundError
3. check_business_rules   -> ValidationError / IllegalStateError
4. check_duplicates       -> ValidationError
5. build + derive_state
6. persist

Any failure in stages 1-4 aborts before the repository is written.
``existing`` is None for create and the already-loaded entity for update.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from src.platform.logging.loguru_io import Logger


DraftT = TypeVar('DraftT')
EntityT = TypeVar('EntityT')
RefT = TypeVar('RefT')


class MutationPipeline(ABC, Generic[DraftT, RefT, EntityT]):
    @abstractmethod
    def check_required_fields(self, draft: DraftT) -> None:
        pass

    @abstractmethod
    async def resolve_references(self, draft: DraftT) -> RefT:
        pass

    @abstractmethod
    def check_business_rules(
        self, draft: DraftT, *, ref: RefT, existing: Optional[EntityT]
    ) -> None:
        pass

    @abstractmethod
    async def check_duplicates(self, draft: DraftT, *, existing: Optional[EntityT]) -> None:
        pass

    @abstractmethod
    def build(self, draft: DraftT, *, ref: RefT, existing: Optional[EntityT]) -> EntityT:
        pass

    def derive_state(self, entity: EntityT) -> EntityT:
        return entity

    @abstractmethod
    async def persist(self, entity: EntityT, *, is_new: bool) -> EntityT:
        pass

    @Logger.io
    async def run(self, *, draft: DraftT, existing: Optional[EntityT] = None) -> EntityT:
        self.check_required_fields(draft)
        ref = await self.resolve_references(draft)
        self.check_business_rules(draft, ref=ref, existing=existing)
        await self.check_duplicates(draft, existing=existing)

        entity = self.derive_state(self.build(draft, ref=ref, existing=existing))
        return await self.persist(entity, is_new=existing is None)
