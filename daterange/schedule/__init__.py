# Re-export schedule components
from .adjustments import (
    end_of_day,
    end_of_month,
    get_month_end,
    start_of_day,
    start_of_month,
    start_of_year,
)
from .generator import iter_days, iter_months, iter_years
