from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ======================================================
# Configuration Commune Pydantic
# ======================================================

class OrmBaseModel(BaseModel):
    """Active le mode ORM (from_attributes) pour lire les objets SQLModel."""
    model_config = ConfigDict(
        from_attributes=True
    )


class ApiModel(OrmBaseModel):
    """Schéma exposé au client : champs en camelCase, noms Python acceptés en entrée."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
