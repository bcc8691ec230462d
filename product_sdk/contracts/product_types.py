"""
Product type contract.

Product types are shared classifications. Products reference them and never
own them.
"""

from __future__ import annotations

from typing import Optional

from product_sdk.contracts.base import ContractModel, Identifier


class ProductType(ContractModel):
    id: Identifier
    name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
