"""Student records, payments, weekly schedules, honour wall pictures and user passwords kept in SQLite."""

__version__ = "0.1.0"