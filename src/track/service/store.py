# SPDX-License-Identifier: MIT

import logging
import math
from copy import deepcopy
from typing import Any, Optional

from track.migrate.normalize import normalize
from track.model.app_data import AppData, empty_app_data
from track.model.day import Day, DayEntry, NotesTarget, Section, TodoItem
from track.model.entity_id import EntityId
from track.model.project import Project, SavedNote
from track.repository.data import DataRepository
from track.service import query
from track.service.backup import validate_backup
from track.service.month import validate_month
from track.service.scheduler import PersistScheduler
from track.template.day import get_day_entry_template, get_day_template, get_todo_template
from track.template.project import get_project_template, get_saved_note_template
from track.time import today_local_date_str

logger = logging.getLogger(__name__)

MAX_HOURS = 24


def clamp_hours(hours: float) -> float:
    if math.isnan(hours):
        return 0
    return round(min(MAX_HOURS, max(0, hours)), 2)


def _next_order(entries: list[DayEntry], section: Section) -> int:
    # Equals the section size unless removals left gaps behind
    section_entries = [entry for entry in entries if entry["section"] == section]
    if not section_entries:
        return 0
    return max(len(section_entries), max(e["order"] for e in section_entries) + 1)


class Store:
    """
    The single authoritative copy of all application data.

    Mutations run synchronously, change the state and then ask the scheduler
    for a debounced persist; only the scheduler touches the repository.
    Mutations aimed at an unknown date, entry, project, note or todo change
    nothing and report it through their return value instead of raising.
    Reads hand out copies so callers can never change the state directly.
    """

    def __init__(
        self,
        repository: DataRepository,
        scheduler: Optional[PersistScheduler] = None,
        current_date: Optional[str] = None,
    ) -> None:
        self._repository = repository
        self._scheduler = scheduler if scheduler is not None else PersistScheduler()
        self._data: AppData = empty_app_data()
        self.current_date: str = current_date or today_local_date_str()
        self.selected_notes_target: Optional[NotesTarget] = None
        self.is_loaded = False
        self.last_save_ok: Optional[bool] = None

    # ─────────────────────────────────────────────────────────
    # Lifecycle & persistence
    # ─────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        try:
            raw = await self._repository.load()
        except Exception:
            logger.exception("failed to load data, starting empty")
            raw = None
        self._data = normalize(raw) if raw is not None else empty_app_data()
        self.is_loaded = True

    async def close(self) -> None:
        await self._scheduler.drain()

    def persist(self) -> None:
        self._scheduler.schedule(self._flush)

    async def _flush(self) -> bool:
        snapshot = self.export_data()
        saved = await self._repository.save(snapshot)
        if not saved:
            logger.warning(
                "saving to %s failed, keeping in-memory state",
                self._repository.location(),
            )
        self.last_save_ok = saved
        return saved

    @property
    def scheduler(self) -> PersistScheduler:
        return self._scheduler

    @property
    def repository(self) -> DataRepository:
        return self._repository

    # ─────────────────────────────────────────────────────────
    # Lookups on live state
    # ─────────────────────────────────────────────────────────

    def __project(self, project_id: EntityId) -> Optional[Project]:
        return query.find_project(self._data["projects"], project_id)

    def __saved_note(self, project: Project, note_id: EntityId) -> Optional[SavedNote]:
        for note in project["savedNotes"]:
            if note["id"] == note_id:
                return note
        return None

    def __entry(self, date: str, entry_id: EntityId) -> Optional[DayEntry]:
        day = self._data["days"].get(date)
        if day is None:
            return None
        for entry in day["entries"]:
            if entry["id"] == entry_id:
                return entry
        return None

    def __todo(self, entry: DayEntry, todo_id: EntityId) -> Optional[TodoItem]:
        for todo in entry["dailyTodos"]:
            if todo["id"] == todo_id:
                return todo
        return None

    def __day_for_write(self, date: str) -> Day:
        return self._data["days"].setdefault(date, get_day_template(date))

    # ─────────────────────────────────────────────────────────
    # Projects
    # ─────────────────────────────────────────────────────────

    def add_project(self, name: str) -> EntityId:
        project = get_project_template(name)
        self._data["projects"].append(project)
        self.persist()
        return project["id"]

    def rename_project(self, project_id: EntityId, name: str) -> bool:
        project = self.__project(project_id)
        if project is None:
            return False
        project["name"] = name
        self.persist()
        return True

    def delete_project(self, project_id: EntityId) -> bool:
        project = self.__project(project_id)
        if project is None:
            return False
        project["archived"] = True
        self.persist()
        return True

    def restore_project(self, project_id: EntityId) -> bool:
        project = self.__project(project_id)
        if project is None:
            return False
        project["archived"] = False
        self.persist()
        return True

    def set_project_months(
        self,
        project_id: EntityId,
        start_month: Optional[int],
        end_month: Optional[int],
    ) -> bool:
        if (start_month is None) != (end_month is None):
            raise ValueError("start and end month must be set together")
        validate_month(start_month)
        validate_month(end_month)

        project = self.__project(project_id)
        if project is None:
            return False
        if start_month is None:
            project.pop("startMonth", None)
            project.pop("endMonth", None)
        else:
            project["startMonth"] = start_month
            project["endMonth"] = end_month
        self.persist()
        return True

    def update_project_global_notes(self, project_id: EntityId, notes: str) -> bool:
        project = self.__project(project_id)
        if project is None:
            return False
        project["globalNotes"] = notes
        self.persist()
        return True

    def save_project_note(self, project_id: EntityId, name: str) -> Optional[EntityId]:
        project = self.__project(project_id)
        if project is None:
            return None
        note = get_saved_note_template(name, project["globalNotes"])
        project["savedNotes"].append(note)
        self.persist()
        return note["id"]

    def load_project_note(self, project_id: EntityId, note_id: EntityId) -> bool:
        project = self.__project(project_id)
        note = self.__saved_note(project, note_id) if project is not None else None
        if project is None or note is None:
            return False
        project["globalNotes"] = note["content"]
        self.persist()
        return True

    def rename_project_note(
        self, project_id: EntityId, note_id: EntityId, name: str
    ) -> bool:
        project = self.__project(project_id)
        note = self.__saved_note(project, note_id) if project is not None else None
        if note is None:
            return False
        note["name"] = name
        self.persist()
        return True

    def delete_project_note(self, project_id: EntityId, note_id: EntityId) -> bool:
        project = self.__project(project_id)
        note = self.__saved_note(project, note_id) if project is not None else None
        if project is None or note is None:
            return False
        project["savedNotes"] = [
            saved for saved in project["savedNotes"] if saved["id"] != note_id
        ]
        self.persist()
        return True

    # ─────────────────────────────────────────────────────────
    # UI selection (never persisted)
    # ─────────────────────────────────────────────────────────

    def set_current_date(self, date: str) -> None:
        self.current_date = date
        self.selected_notes_target = None

    def set_selected_notes_target(self, target: Optional[NotesTarget]) -> None:
        self.selected_notes_target = deepcopy(target)

    # ─────────────────────────────────────────────────────────
    # Entries
    # ─────────────────────────────────────────────────────────

    def add_entry(self, project_id: EntityId, section: Section) -> EntityId:
        day = self.__day_for_write(self.current_date)
        entry = get_day_entry_template(
            project_id, section, _next_order(day["entries"], section)
        )
        day["entries"].append(entry)
        self.persist()
        return entry["id"]

    def remove_entry(self, date: str, entry_id: EntityId) -> bool:
        day = self._data["days"].get(date)
        if day is None or self.__entry(date, entry_id) is None:
            return False
        # Remaining orders keep their gaps
        day["entries"] = [entry for entry in day["entries"] if entry["id"] != entry_id]
        target = self.selected_notes_target
        if target is not None and target["entryId"] == entry_id:
            self.selected_notes_target = None
        self.persist()
        return True

    def update_entry_time(self, date: str, entry_id: EntityId, hours: float) -> bool:
        entry = self.__entry(date, entry_id)
        if entry is None:
            return False
        entry["timeSpent"] = clamp_hours(hours)
        self.persist()
        return True

    def update_entry_done(self, date: str, entry_id: EntityId, done: bool) -> bool:
        entry = self.__entry(date, entry_id)
        if entry is None:
            return False
        entry["done"] = done
        self.persist()
        return True

    def add_daily_todo(
        self, date: str, entry_id: EntityId, text: str
    ) -> Optional[EntityId]:
        entry = self.__entry(date, entry_id)
        if entry is None:
            return None
        todo = get_todo_template(text)
        entry["dailyTodos"].append(todo)
        self.persist()
        return todo["id"]

    def update_daily_todo(
        self,
        date: str,
        entry_id: EntityId,
        todo_id: EntityId,
        text: Optional[str] = None,
        done: Optional[bool] = None,
    ) -> bool:
        entry = self.__entry(date, entry_id)
        todo = self.__todo(entry, todo_id) if entry is not None else None
        if todo is None:
            return False
        if text is not None:
            todo["text"] = text
        if done is not None:
            todo["done"] = done
        self.persist()
        return True

    def remove_daily_todo(self, date: str, entry_id: EntityId, todo_id: EntityId) -> bool:
        entry = self.__entry(date, entry_id)
        if entry is None or self.__todo(entry, todo_id) is None:
            return False
        entry["dailyTodos"] = [
            todo for todo in entry["dailyTodos"] if todo["id"] != todo_id
        ]
        self.persist()
        return True

    def move_entry(
        self, date: str, entry_id: EntityId, to_section: Section, new_index: int
    ) -> bool:
        day = self._data["days"].get(date)
        entry = self.__entry(date, entry_id)
        if day is None or entry is None:
            return False

        remaining = [e for e in day["entries"] if e["id"] != entry_id]
        target = query.sorted_section(remaining, to_section)
        others = [e for e in remaining if e["section"] != to_section]

        entry["section"] = to_section
        target.insert(min(max(new_index, 0), len(target)), entry)
        for index, target_entry in enumerate(target):
            target_entry["order"] = index

        day["entries"] = others + target
        self.persist()
        return True

    def reorder_entries(
        self, date: str, section: Section, entry_ids: list[EntityId]
    ) -> bool:
        day = self._data["days"].get(date)
        if day is None:
            return False

        section_entries = query.sorted_section(day["entries"], section)
        by_id = {entry["id"]: entry for entry in section_entries}
        reordered: list[DayEntry] = []
        for entry_id in entry_ids:
            entry = by_id.pop(entry_id, None)
            if entry is not None:
                reordered.append(entry)
        # Section entries the caller did not list keep their relative order
        reordered.extend(entry for entry in section_entries if entry["id"] in by_id)

        for index, entry in enumerate(reordered):
            entry["order"] = index

        day["entries"] = [
            entry for entry in day["entries"] if entry["section"] != section
        ] + reordered
        self.persist()
        return True

    def populate_from_day(
        self, source_date: str, import_incomplete_todos: bool = False
    ) -> int:
        """
        Copy the structure of another day onto the current date.

        Each source entry becomes a fresh entry in the same section, appended
        after what the current day already holds, with no time logged and not
        done. Open todos are carried over as new todos when requested, done
        todos never are.
        """
        source_day = self._data["days"].get(source_date)
        if source_day is None or not source_day["entries"]:
            return 0

        source_entries = deepcopy(source_day["entries"])
        day = self.__day_for_write(self.current_date)
        for source_entry in source_entries:
            entry = get_day_entry_template(
                source_entry["projectId"],
                source_entry["section"],
                _next_order(day["entries"], source_entry["section"]),
            )
            if import_incomplete_todos:
                entry["dailyTodos"] = [
                    get_todo_template(todo["text"])
                    for todo in source_entry["dailyTodos"]
                    if not todo["done"]
                ]
            day["entries"].append(entry)

        self.persist()
        return len(source_entries)

    # ─────────────────────────────────────────────────────────
    # Export / import
    # ─────────────────────────────────────────────────────────

    def export_data(self) -> AppData:
        return deepcopy(self._data)

    def import_data(self, data: Any) -> None:
        """Replace everything with data; raises InvalidBackupError untouched."""
        validate_backup(data)
        self._data = normalize(data)

        target = self.selected_notes_target
        if target is not None and not any(
            entry["id"] == target["entryId"]
            for day in self._data["days"].values()
            for entry in day["entries"]
        ):
            self.selected_notes_target = None
        self.persist()

    # ─────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────

    @property
    def projects(self) -> list[Project]:
        return deepcopy(self._data["projects"])

    @property
    def days(self) -> dict[str, Day]:
        return deepcopy(self._data["days"])

    def get_entries_for_date(self, date: str) -> list[DayEntry]:
        day = self._data["days"].get(date)
        return deepcopy(day["entries"]) if day is not None else []

    def get_entry(self, date: str, entry_id: EntityId) -> Optional[DayEntry]:
        return deepcopy(self.__entry(date, entry_id))

    def get_today_entries(self) -> list[DayEntry]:
        return query.sorted_section(self.get_entries_for_date(self.current_date), "today")

    def get_on_deck_entries(self) -> list[DayEntry]:
        return query.sorted_section(
            self.get_entries_for_date(self.current_date), "onDeck"
        )

    def get_dates_with_entries(self) -> list[str]:
        return query.dates_with_entries(self._data["days"])

    def get_project_by_id(self, project_id: EntityId) -> Optional[Project]:
        return deepcopy(self.__project(project_id))

    def get_active_projects(self) -> list[Project]:
        return deepcopy(query.active_projects(self._data["projects"]))
