"""
Validation des attributs sélectionnés pour une ligne de commande.

Un produit simple (sans jeu d'attributs) n'accepte aucune sélection. Un produit
configurable exige exactement une valeur par jeu, et cette valeur doit être la
valeur canonique d'un des items du jeu.
"""
from typing import Dict, List, Optional, Sequence

from storefront.catalog.domain.entities import AttributeSetEntity, ProductKind
from storefront.orders.exceptions import InvalidAttributeException, MissingAttributesException
from storefront.orders.models import SelectedAttributeInput


def _product_kind(attribute_sets: Sequence[AttributeSetEntity]) -> ProductKind:
    return ProductKind.CONFIGURABLE if attribute_sets else ProductKind.SIMPLE


def validate_selected_attributes(
    product_id: str,
    attribute_sets: Sequence[AttributeSetEntity],
    selected: Optional[Sequence[SelectedAttributeInput]],
) -> None:
    """Vérifie la sélection d'une ligne contre les jeux d'attributs du produit.

    Les jeux manquants sont tous collectés (dans l'ordre du catalogue) avant de
    lever MissingAttributesException. Pour les valeurs, la première sélection
    invalide lève InvalidAttributeException.
    """
    selected = selected or []

    if _product_kind(attribute_sets) is ProductKind.SIMPLE:
        if selected:
            raise InvalidAttributeException(
                f"Attributes not allowed for simple product {product_id}",
                product_id=product_id,
            )
        return

    sets_by_id: Dict[str, AttributeSetEntity] = {attribute_set.id: attribute_set for attribute_set in attribute_sets}
    provided_ids = {selection.id for selection in selected}

    missing = [attribute_set.name for attribute_set in attribute_sets if attribute_set.id not in provided_ids]
    if missing:
        raise MissingAttributesException(product_id, missing)

    seen = set()
    for selection in selected:
        attribute_set = sets_by_id.get(selection.id)
        if attribute_set is None:
            raise InvalidAttributeException(
                f"Invalid attribute '{selection.id}' for product {product_id}",
                product_id=product_id,
                attribute=selection.id,
            )
        if selection.id in seen:
            raise InvalidAttributeException(
                f"Attribute {attribute_set.name} selected more than once for product {product_id}",
                product_id=product_id,
                attribute=attribute_set.name,
            )
        seen.add(selection.id)
        if not attribute_set.has_value(selection.value):
            raise InvalidAttributeException(
                f"Invalid attribute value '{selection.value}' for {attribute_set.name} on product {product_id}",
                product_id=product_id,
                attribute=attribute_set.name,
            )


def resolve_selected_attributes(
    attribute_sets: Sequence[AttributeSetEntity],
    selected: Optional[Sequence[SelectedAttributeInput]],
) -> List[Dict[str, str]]:
    """Construit les triplets {id, name, value} persistés avec la ligne.

    À appeler après validate_selected_attributes : chaque id est supposé connu.
    """
    names = {attribute_set.id: attribute_set.name for attribute_set in attribute_sets}
    return [
        {"id": selection.id, "name": names[selection.id], "value": selection.value}
        for selection in (selected or [])
    ]
