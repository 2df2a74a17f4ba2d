from driverpay.models.settings import UserSettings  # noqa: F401
from driverpay.models.settlement import PeriodSettlement  # noqa: F401
from driverpay.models.shift import Route, Shift, Stop  # noqa: F401
from driverpay.models.user import User  # noqa: F401
