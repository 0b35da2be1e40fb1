"""NiceGUI chat interface with PDF attachments."""

import logging

from nicegui import app, events, ui

from pdfchat.conversation.orchestrator import TurnOrchestrator
from pdfchat.conversation.store import ConversationStore
from pdfchat.gateway.client import GeminiClient
from pdfchat.gateway.config import get_chat_config
from pdfchat.models.schemas import Message, MessageStatus, Sender, UploadedFile
from pdfchat.parsing.pdf_parser import PDFParseError, PypdfBackend, TextExtractor
from pdfchat.parsing.uploads import PDF_MIME_TYPE, UploadManager, UploadValidationError
from pdfchat.ui.formatting import format_file_size, message_footer, model_display_name

logger = logging.getLogger(__name__)

# Shared by all pages; uploads stay disabled until the backend is attached
extractor = TextExtractor()


def load_pdf_backend() -> None:
    extractor.attach_backend(PypdfBackend())


app.on_startup(load_pdf_backend)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .message-user {
        background: #3b82f6;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .body--dark .message-assistant { background: #1f2937; color: #f3f4f6; }

    .message-error {
        background: #fef2f2 !important;
        color: #7f1d1d !important;
        border: 1px solid #ef4444;
    }

    .avatar-user { background: #16a34a; }
    .avatar-assistant { background: #2563eb; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9ca3af;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .status-dot { width: 8px; height: 8px; border-radius: 50%; }
    .status-idle { background: #22c55e; }
    .status-busy { background: #eab308; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    config = get_chat_config()
    model_label = model_display_name(config.model_name)
    uploads = UploadManager(extractor)
    store = ConversationStore(uploads=uploads)
    client = GeminiClient(config)
    dark = ui.dark_mode(True)

    title_label: ui.label
    status_label: ui.label
    status_dot: ui.element
    scroll_area: ui.scroll_area
    messages_container: ui.column
    attachments_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button
    attach_btn: ui.button
    footer_label: ui.label
    clear_item: ui.menu_item
    uploader: ui.upload

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "smart_toy"
        avatar_classes = f"w-8 h-8 shrink-0 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-base")

    def copy_message(message: Message, button: ui.button) -> None:
        try:
            ui.clipboard.write(message.content)
        except Exception as e:
            logger.warning(f"Failed to copy message {message.id}: {e}")
            return
        button.props("icon=check")
        ui.timer(2.0, lambda: button.props("icon=content_copy"), once=True)

    def render_message(msg: Message) -> None:
        is_user = msg.sender is Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        if msg.status is MessageStatus.ERROR:
            bubble += " message-error"

        with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes(
                f"max-w-[70%] gap-1 {'items-end' if is_user else 'items-start'}"
            ):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    with ui.row().classes("items-start gap-2 no-wrap"):
                        ui.label(msg.content).classes(
                            "text-sm leading-relaxed whitespace-pre-wrap"
                        )
                        copy_btn = ui.button(icon="content_copy").props(
                            "flat round dense size=xs"
                        )
                        copy_btn.on_click(lambda m=msg, b=copy_btn: copy_message(m, b))
                ui.label(message_footer(msg)).classes("text-[10px] text-gray-400 px-2")
            if is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def render_attachment(uploaded: UploadedFile) -> None:
        with ui.row().classes(
            "w-full items-center gap-3 p-3 rounded-lg border no-wrap"
        ):
            ui.icon("description").classes("text-red-500")
            with ui.column().classes("flex-grow gap-0 min-w-0"):
                ui.label(uploaded.name).classes("text-sm font-medium truncate")
                ui.label(f"{format_file_size(uploaded.size)} • PDF").classes(
                    "text-xs text-gray-500"
                )
            ui.button(
                icon="close", on_click=lambda f=uploaded: remove_attachment(f.id)
            ).props("flat round dense size=sm")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in store.messages:
                render_message(msg)
            if orchestrator.is_sending:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    def refresh_attachments() -> None:
        attachments_container.clear()
        with attachments_container:
            for uploaded in uploads.list_pending():
                render_attachment(uploaded)

    def refresh_controls() -> None:
        busy = orchestrator.is_sending
        title_label.set_text(store.session.title)
        status_label.set_text("Thinking..." if busy else model_label)
        status_dot.classes(
            add="status-busy" if busy else "status-idle",
            remove="status-idle" if busy else "status-busy",
        )
        input_field.set_enabled(not busy)
        send_btn.set_enabled(not busy)
        attach_btn.set_enabled(not busy and uploads.is_available)
        clear_item.set_enabled(not busy)

        pending = len(uploads.list_pending())
        footer = f"{len(store.messages)} messages • Powered by Google {model_label}"
        if pending:
            footer += f" • {pending} file{'s' if pending > 1 else ''} uploaded"
        footer_label.set_text(footer)

    def refresh() -> None:
        refresh_messages()
        refresh_attachments()
        refresh_controls()

    orchestrator = TurnOrchestrator(
        store, uploads, client, model_name=config.model_name, on_update=refresh
    )

    async def send_message() -> None:
        text = input_field.value or ""
        if not orchestrator.can_submit(text):
            return
        input_field.value = ""
        await orchestrator.submit(text)

    def remove_attachment(file_id: str) -> None:
        uploads.remove_file(file_id)
        refresh_attachments()
        refresh_controls()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        try:
            data = await e.file.read()
            await uploads.add_file(data, e.file.name, e.file.content_type)
        except UploadValidationError as exc:
            ui.notify(str(exc), type="warning")
        except PDFParseError as exc:
            ui.notify(f"Error processing PDF: {exc}", type="negative")
        else:
            refresh_attachments()
            refresh_controls()
        finally:
            uploader.reset()

    def clear_conversation() -> None:
        store.reset()
        refresh()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto h-screen gap-0 no-wrap"):
        # Header
        with ui.row().classes("w-full px-4 py-3 items-center justify-between border-b"):
            with ui.row().classes("items-center gap-3"):
                render_avatar(False)
                with ui.column().classes("gap-0"):
                    title_label = ui.label().classes("font-semibold text-sm truncate max-w-48")
                    with ui.row().classes("items-center gap-2"):
                        status_dot = ui.element("span").classes("status-dot status-idle")
                        status_label = ui.label().classes("text-xs text-gray-500")
            with ui.row().classes("items-center gap-1"):
                ui.button(icon="dark_mode", on_click=dark.toggle).props("flat round dense")
                with ui.button(icon="more_vert").props("flat round dense"):
                    with ui.menu():
                        clear_item = ui.menu_item(
                            "Clear conversation", on_click=clear_conversation
                        )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full gap-6 p-4")

        # Input
        with ui.column().classes("w-full p-4 gap-3 border-t"):
            attachments_container = ui.column().classes("w-full gap-2")
            with ui.row().classes("w-full items-end gap-3 no-wrap"):
                input_field = (
                    ui.textarea(placeholder="Type your message...")
                    .props("autogrow outlined dense rows=1 counter")
                    .classes("flex-grow")
                    .on("keydown.enter.exact.prevent", send_message)
                )
                attach_btn = ui.button(
                    icon="attach_file", on_click=lambda: uploader.run_method("pickFiles")
                ).props("outline round")
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "round unelevated"
                )
            with ui.row().classes("w-full justify-between text-xs text-gray-500"):
                footer_label = ui.label()
                ui.label("Press Enter to send • Shift+Enter for new line")

        uploader = (
            ui.upload(
                on_upload=handle_upload,
                auto_upload=True,
                max_files=1,
            )
            .props(f"accept=.pdf,{PDF_MIME_TYPE}")
            .classes("hidden")
        )

    refresh()
