# -*- coding: utf-8 -*-
"""
Phần dùng chung của các repository: ghi field theo whitelist, exists, delete.
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List, Type
from django.db import models, transaction


class BaseRepository:
    model: Type[models.Model]

    def exists(self, pk: Any) -> bool:
        return self.model.objects.filter(pk=pk).exists()

    @transaction.atomic
    def save_fields(self, obj: models.Model, patch: Dict[str, Any], allowed: Optional[set] = None) -> models.Model:
        fields: List[str] = []
        for k, v in patch.items():
            if (allowed is None) or (k in allowed):
                setattr(obj, k, v)
                fields.append(k)
        if fields:
            obj.save(update_fields=fields)
        return obj

    @transaction.atomic
    def delete(self, obj: models.Model) -> None:
        obj.delete()
