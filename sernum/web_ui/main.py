"""NiceGUI entrypoint for the serial number web runtime."""

from __future__ import annotations

import argparse
from typing import Optional

from nicegui import ui

from sernum.domain.entities import SerialNumberEntry
from sernum.domain.errors import StoreError
from sernum.utils import logging as logging_utils
from sernum.web_ui.runtime import WebRuntime, handle_list_key


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --sn-card: rgba(255, 255, 255, 0.9);
  --sn-border: #c9d7e9;
  --sn-danger: #b42318;
}
.sn-page { max-width: 640px; margin: 0 auto; padding: 14px; }
.sn-card { background: var(--sn-card); border: 1px solid var(--sn-border); border-radius: 14px; }
.sn-mono { font-family: monospace; }
</style>
        """
    )


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        dismiss_timer: dict = {"timer": None}

        def on_message(error: Optional[str], notice: Optional[str]) -> None:
            render_message.refresh()
            if error:
                ui.notify(error, color="negative", close_button="OK")
            elif notice:
                ui.notify(notice, color="positive")
            else:
                return
            if dismiss_timer["timer"] is not None:
                dismiss_timer["timer"].cancel()
            if runtime.notice_timeout_s > 0:
                with page:
                    dismiss_timer["timer"] = ui.timer(runtime.notice_timeout_s, dismiss, once=True)

        try:
            vm = runtime.new_session()
        except StoreError as exc:
            ui.label(f"Could not open the entry store: {exc}").classes("text-negative")
            return

        def dismiss() -> None:
            dismiss_timer["timer"] = None
            vm.dismiss_error()
            vm.dismiss_notice()

        def add() -> None:
            vm.set_input(str(entry_input.value or ""))
            if vm.cmd_add():
                entry_input.value = vm.input_text

        def delete_all() -> None:
            vm.cmd_delete_all()

        def export() -> None:
            vm.cmd_export(runtime.export_sink(ui.download), runtime.export_filename)

        @ui.refreshable
        def render_message() -> None:
            if vm.error_message:
                ui.label(vm.error_message).classes("text-negative")

        @ui.refreshable
        def render_list() -> None:
            selection = vm.get_selection()
            with ui.column().classes("w-full sn-card q-pa-sm"):
                if not vm.entries:
                    ui.label("No serial numbers yet.").classes("text-grey-7")

                def row(entry: SerialNumberEntry) -> None:
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.checkbox(
                            entry.value,
                            value=entry.id in selection,
                            on_change=lambda _e, eid=entry.id: vm.toggle_selection(eid),
                        ).classes("sn-mono")
                        ui.button(
                            icon="delete",
                            on_click=lambda _e, eid=entry.id: vm.cmd_delete_entry(eid),
                        ).props("flat dense color=negative")

                for entry in vm.entries:
                    row(entry)
            with ui.row().classes("q-gutter-sm"):
                delete_selected = ui.button(
                    f"Delete Selected ({len(selection)})",
                    on_click=vm.cmd_delete_selected,
                    color="negative",
                )
                if not vm.can_delete_selected:
                    delete_selected.disable()
                ui.button("Delete All", on_click=delete_all, color="warning")
                export_button = ui.button("Export CSV", on_click=export, color="primary")
                if not vm.can_export:
                    export_button.disable()

        def on_key(e) -> None:
            if e.action.keydown and not e.action.repeat:
                handle_list_key(vm, e.key.name)

        with ui.column().classes("sn-page w-full") as page:
            ui.keyboard(on_key=on_key)
            with ui.row().classes("w-full justify-between items-center"):
                ui.label("Serial Numbers").classes("text-h5")
                ui.label(runtime.status_message).classes("sn-mono text-caption")
            with ui.row().classes("w-full items-end no-wrap"):
                entry_input = ui.input("Serial number").props("dense outlined autofocus").classes("grow")
                entry_input.on("keydown.enter", add)
                ui.button("Add", on_click=add, color="primary")
            render_message()
            render_list()

        vm.on_entries_changed = lambda _entries: render_list.refresh()
        vm.on_selection_changed = lambda _selection: render_list.refresh()
        vm.on_message_changed = on_message


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the serial number NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    logging_utils.configure_root()
    args = _parse_args()
    runtime = WebRuntime()
    if args.smoke_test:
        payload = runtime.settings_payload()
        print("web-smoke-ok", sorted(payload.keys()))
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Serial Numbers",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
