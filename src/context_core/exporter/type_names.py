"""Pin type rendering for _meta.json."""

from ..model.graph import PC_CLASS, PC_OBJECT, PinType


def render_pin_type(pin_type: PinType) -> str:
    """
    Render a pin type as a compact type token.

    Steps run in a fixed order: category (or referenced class name), pointer
    marker for object/class categories, List<> wrap for arrays, then the
    reference marker. E.g. an array of Actor object references passed by
    reference renders as "List<Actor*>&".
    """
    name = pin_type.category
    if pin_type.sub_category_object:
        name = pin_type.sub_category_object

    if pin_type.category in (PC_OBJECT, PC_CLASS):
        name += "*"

    if pin_type.is_array:
        name = f"List<{name}>"

    if pin_type.is_reference:
        name += "&"

    return name
