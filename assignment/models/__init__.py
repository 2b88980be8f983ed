from .roster_entry import RosterEntry
