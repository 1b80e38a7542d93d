from .bind import BindReport, BindValidator, check_bindable, is_bindable, probe_bind

__all__ = [
    "BindReport",
    "BindValidator",
    "check_bindable",
    "is_bindable",
    "probe_bind",
]
