"""SQL statement builder mixins."""

from sqlstitch.builder.mixins._common_table_expr import CommonTableExpressionMixin
from sqlstitch.builder.mixins._from import FromClauseMixin
from sqlstitch.builder.mixins._join import JoinClauseMixin
from sqlstitch.builder.mixins._limit_offset import LimitOffsetClauseMixin
from sqlstitch.builder.mixins._order_by import OrderByClauseMixin
from sqlstitch.builder.mixins._returning import ReturningClauseMixin
from sqlstitch.builder.mixins._set_operations import SetOperationMixin
from sqlstitch.builder.mixins._where import HavingClauseMixin, WhereClauseMixin

__all__ = (
    "CommonTableExpressionMixin",
    "FromClauseMixin",
    "HavingClauseMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "ReturningClauseMixin",
    "SetOperationMixin",
    "WhereClauseMixin",
)
