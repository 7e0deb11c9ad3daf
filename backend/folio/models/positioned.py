from folio.extensions import db


class PositionedMixin:
    """
    Shared shape of every ordered child record: an id, the id of the parent
    scope it is ordered within, and a 0-based position in that scope.

    Subclasses name their parent column in ``__scope__``.
    """

    __scope__: str = ""

    position = db.Column(db.Integer, nullable=False, default=0)

    @classmethod
    def scope_column(cls):
        return getattr(cls, cls.__scope__)

    @property
    def scope_id(self) -> str:
        return getattr(self, self.__scope__)
