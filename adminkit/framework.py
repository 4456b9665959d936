"""
AdminKit Page

AdminKit: one settings page. It owns the page structure (tabs and their
sections), gathers field definitions, renders fields with their stored
values and runs the save pipeline:

    raw input -> per-field sanitize -> per-field validate -> persist

Only submitted keys are sanitized and written; stored keys the submission
leaves out are kept. The first failing field (in definition order) aborts
the save with a ValidationError; nothing is persisted in that case.

Structure and fields can be extended by other code through the page-scoped
``<slug>.adminkit_structure`` and ``<slug>.adminkit_fields`` filters.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup

from adminkit.exceptions import UnknownFieldTypeError
from adminkit.fields.checkbox import CheckboxGroupField
from adminkit.fields.conditions import condition_fields, evaluate_conditions
from adminkit.fields.definition import FieldDefinition
from adminkit.fields.radio import RadioGroupField
from adminkit.fields.registry import FieldRegistry
from adminkit.fields.rendering import get_template_environment, render_attributes
from adminkit.hooks import (
    HOOK_ADMINKIT_FIELDS,
    HOOK_ADMINKIT_SAVE_FIELDS,
    HOOK_ADMINKIT_STRUCTURE,
    HOOK_POST_SAVE_SETTINGS,
    HOOK_PRE_SAVE_SETTINGS,
    HOOK_SANITIZE_SETTING,
    HookRegistry,
    page_hook,
)
from adminkit.settings.store import SettingsStore
from adminkit.utils.sanitize import sanitize_key

logger = logging.getLogger(__name__)

DISPLAY_MODE_CARDS = "cards"
DISPLAY_MODE_TABS = "tabs"

# Submitted keys with this suffix are module on/off switches
MODULE_TOGGLE_SUFFIX = "_enabled"

HTML_FIELD_TYPE = "html"

_CHECKBOX = FieldDefinition(type="checkbox")
_TEXT = FieldDefinition(type="text")


class AdminKit:
    """
    A settings page backed by a SettingsStore.

    Args:
        slug:           Page slug; also prefixes the page's hook names.
        store:          Where the page's settings mapping lives.
        hooks:          Hook registry shared with modules.
        field_registry: Field types available on the page.
        option_name:    Name of the submitted mapping (``settings[<id>]``).
    """

    def __init__(
        self,
        slug: str,
        store: SettingsStore,
        hooks: HookRegistry | None = None,
        field_registry: FieldRegistry | None = None,
        *,
        option_name: str = "settings",
        title: str = "",
        description: str = "",
    ) -> None:
        self.slug = slug
        self.store = store
        self.hooks = hooks or HookRegistry()
        self.option_name = option_name
        self.field_registry = field_registry or FieldRegistry(self.hooks, option_name=option_name)
        self.title = title or slug.replace("_", " ").title()
        self.description = description
        self._structure: dict[str, dict[str, Any]] = {}
        self._fields: dict[str, list[FieldDefinition]] = {}

    # ── Hook names ────────────────────────────────────────────────────────────

    def hook(self, name: str) -> str:
        return page_hook(self.slug, name)

    # ── Structure ─────────────────────────────────────────────────────────────

    def add_tab(
        self,
        tab_key: str,
        title: str | None = None,
        display_mode: str = DISPLAY_MODE_CARDS,
        sections: Mapping[str, Any] | None = None,
    ) -> None:
        tab = self._structure.setdefault(tab_key, {"sections": {}})
        tab["title"] = title or tab_key.capitalize()
        tab["display_mode"] = display_mode
        if sections:
            tab["sections"].update(sections)

    def add_section(self, tab_key: str, section_key: str, title: str | None = None) -> None:
        if tab_key not in self._structure:
            self.add_tab(tab_key)
        self._structure[tab_key]["sections"][section_key] = title or section_key.replace("_", " ").title()

    def add_fields(self, tab_key: str, definitions: Iterable[FieldDefinition | Mapping[str, Any]]) -> None:
        self._fields.setdefault(tab_key, []).extend(FieldDefinition.coerce(d) for d in definitions)

    def get_content_structure(self) -> dict[str, dict[str, Any]]:
        """Tabs, their sections and display modes, after filters."""
        return self.hooks.apply_filters(self.hook(HOOK_ADMINKIT_STRUCTURE), copy.deepcopy(self._structure))

    def get_content_fields(self) -> dict[str, list[FieldDefinition]]:
        """Field definitions per tab, after filters."""
        fields = self.hooks.apply_filters(
            self.hook(HOOK_ADMINKIT_FIELDS),
            {tab: list(definitions) for tab, definitions in self._fields.items()},
        )
        return {tab: [FieldDefinition.coerce(d) for d in definitions] for tab, definitions in fields.items()}

    def get_all_fields(self) -> list[FieldDefinition]:
        """Every definition with an id, in tab order then definition order."""
        return [d for definitions in self.get_content_fields().values() for d in definitions if d.id]

    def get_tabs(self) -> dict[str, str]:
        return {
            tab_key: tab_config.get("title") or tab_key.capitalize()
            for tab_key, tab_config in self.get_content_structure().items()
        }

    def get_sections(self, tab_key: str) -> dict[str, Any]:
        return dict(self.get_content_structure().get(tab_key, {}).get("sections", {}))

    def get_section_display_mode(self, tab_key: str) -> str:
        return self.get_content_structure().get(tab_key, {}).get("display_mode", DISPLAY_MODE_CARDS)

    def get_active_tab(self, requested: str | None = None) -> str:
        """Return requested if it names a tab, else the first tab ("" when there are none)."""
        tabs = self.get_tabs()
        current = requested if requested in tabs else sanitize_key(requested)
        if not current or current not in tabs:
            current = next(iter(tabs), "")
        return current

    def get_active_section(self, tab_key: str, requested: str | None = None) -> str:
        sections = self.get_sections(tab_key)
        current = requested if requested in sections else sanitize_key(requested)
        if not current or current not in sections:
            current = next(iter(sections), "")
        return current

    # ── Values ────────────────────────────────────────────────────────────────

    def get_settings(self) -> dict[str, Any]:
        return self.store.load()

    def get_field_value(self, field_id: str, default: Any = "", settings: Mapping[str, Any] | None = None) -> Any:
        settings = self.get_settings() if settings is None else settings
        return settings.get(field_id, default)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render_field(
        self, definition: FieldDefinition | Mapping[str, Any], settings: Mapping[str, Any] | None = None
    ) -> Markup:
        """Render a field with its stored value inside the standard wrapper."""
        definition = FieldDefinition.coerce(definition)
        environment = self.field_registry.environment or get_template_environment()

        default = definition.std if definition.std is not None else ""
        value = self.get_field_value(definition.id, default, settings)

        try:
            field = self.field_registry.create_field(definition, value)
        except UnknownFieldTypeError:
            return Markup(
                environment.get_template("error.html").render(message=f"Unknown field type: {definition.type}")
            )

        data_attributes = {"data-field-id": definition.id, "data-field-type": definition.type}
        data_attributes.update(field.conditional_data_attributes())

        return Markup(
            environment.get_template("field.html").render(
                classes=field.wrapper_classes(),
                data_attributes=render_attributes(data_attributes),
                grouped=isinstance(field, (CheckboxGroupField, RadioGroupField)),
                label=field.render_label(),
                control=field.render(),
                description=field.render_description(),
            )
        )

    def render_section(self, tab_key: str, section_key: str | None = None) -> Markup:
        """Render the fields of one section of a tab (all of the tab's fields when section_key is None)."""
        environment = self.field_registry.environment or get_template_environment()
        settings = self.get_settings()
        definitions = self.get_content_fields().get(tab_key, [])
        if section_key is not None:
            definitions = [d for d in definitions if d.section == section_key]

        title = self.get_sections(tab_key).get(section_key) if section_key else None
        if isinstance(title, Mapping):
            title = title.get("title")

        return Markup(
            environment.get_template("section.html").render(
                section_key=section_key or tab_key,
                title=title,
                fields=[self.render_field(d, settings) for d in definitions if d.id],
            )
        )

    # ── Save pipeline ─────────────────────────────────────────────────────────

    def get_save_fields(self) -> list[FieldDefinition]:
        """
        Definitions the save pipeline sanitizes and validates against.

        Starts from get_all_fields(); the ``<slug>.adminkit_save_fields``
        filter can add definitions that are not rendered (fields of disabled
        modules). The first definition of an id wins.
        """
        definitions = self.hooks.apply_filters(self.hook(HOOK_ADMINKIT_SAVE_FIELDS), self.get_all_fields())
        unique: dict[str, FieldDefinition] = {}
        for definition in definitions:
            definition = FieldDefinition.coerce(definition)
            if definition.id and definition.id not in unique:
                unique[definition.id] = definition
        return list(unique.values())

    def sanitize_setting(self, value: Any, definition: FieldDefinition) -> Any:
        """Sanitize one value, letting a sanitize_setting filter take over."""
        custom = self.hooks.apply_filters(self.hook(HOOK_SANITIZE_SETTING), value, definition)
        if custom is not value:
            return custom
        return self.field_registry.sanitize_field_value(definition, value)

    def sanitize_settings_data(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """
        Sanitize a submitted mapping.

        Only submitted keys are returned. Defined fields use their own type
        and html fields are dropped; undefined ``*_enabled`` keys are treated
        as checkboxes and any other undefined key as text.
        """
        sanitized: dict[str, Any] = {}
        defined: set[str] = set()

        for definition in self.get_save_fields():
            defined.add(definition.id)
            if definition.id not in raw or definition.type == HTML_FIELD_TYPE:
                continue
            sanitized[definition.id] = self.sanitize_setting(raw[definition.id], definition)

        for key, value in raw.items():
            if key in defined:
                continue
            if key.endswith(MODULE_TOGGLE_SUFFIX):
                sanitized[key] = self.sanitize_setting(value, _CHECKBOX)
            else:
                sanitized[key] = self.sanitize_setting(value, _TEXT)

        return self.hooks.apply_filters(self.hook(HOOK_PRE_SAVE_SETTINGS), sanitized)

    def validate_settings_data(
        self, sanitized: Mapping[str, Any], current: Mapping[str, Any] | None = None
    ) -> None:
        """
        Validate sanitized values in definition order.

        A field is checked when it was submitted or when its show_if rule
        reads a submitted field. Values and visibility come from the field
        defaults, then current (the stored settings by default), then
        sanitized. Fields hidden by their show_if rules are skipped.

        Raises:
            ValidationError: for the first field that fails.
        """
        definitions = self.get_save_fields()
        values = {d.id: d.std for d in definitions if d.std is not None}
        values.update(self.get_settings() if current is None else current)
        values.update(sanitized)

        submitted = set(sanitized)
        for definition in definitions:
            if definition.id not in submitted and not condition_fields(definition.show_if) & submitted:
                continue
            if not evaluate_conditions(definition.show_if, values):
                continue
            self.field_registry.validate_field_value(definition, values.get(definition.id, ""))

    def save_settings(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """
        Sanitize, validate and persist a submitted mapping.

        Stored keys the submission does not mention are kept.

        Returns:
            The mapping that was persisted.

        Raises:
            ValidationError:    the first field that failed validation.
            SettingsStoreError: the store could not persist the mapping.
        """
        stored = self.get_settings()
        sanitized = self.sanitize_settings_data(raw)
        self.validate_settings_data(sanitized, stored)

        settings = {**stored, **sanitized}
        self.store.save(settings)
        logger.info("Settings saved for page %s: %d keys", self.slug, len(sanitized))

        self.hooks.do_action(self.hook(HOOK_POST_SAVE_SETTINGS), settings)
        return settings
