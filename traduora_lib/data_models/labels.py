from typing import NewType

from traduora_lib.data_models.base_model import TraduoraModel

LabelId = NewType("LabelId", str)


class Label(TraduoraModel):
    """
    A label which can be attached to terms and translations of a project.

    Attributes
    ----------
    id : LabelId
        Unique id of the label.
    value : str
        Display name of the label.
    color : str
        Color of the label, usually in hex form (e.g. ``#D81159``).
    """

    id: LabelId
    value: str
    color: str
