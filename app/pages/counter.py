import json

from fasthtml.common import *
from fasthtml.core import APIRouter
from monsterui.all import *
from starcounter import Counter, Notification

rt = APIRouter()

RESET_DIALOG_SIGNAL = "show_reset_dialog"


def ResetConfirmDialog():
    """Asks before resetting; only "Yes" calls the reset event. Escape or a backdrop click cancels."""
    close = f"${RESET_DIALOG_SIGNAL} = false"
    return Div(
        Card(
            P("Are you sure you want to reset the counter?", cls=TextPresets.muted_sm),
            header=H3("Reset Counter"),
            footer=DivRAligned(
                Button("Cancel", data_on_click=close, cls=ButtonT.ghost),
                Button("Yes", data_on_click=f"{close}; {Counter.reset()}", cls=ButtonT.destructive),
                cls="space-x-2",
            ),
            cls="w-full max-w-sm",
        ),
        {"data-on-keydown__window": f"evt.key === 'Escape' && ({close})"},
        data_show=f"${RESET_DIALOG_SIGNAL}",
        data_on_click=f"evt.target === el && ({close})",
        id="reset-dialog",
        role="dialog",
        style="display: none",
        cls="fixed inset-0 z-50 flex items-center justify-center bg-black/40",
    )


def CounterControls():
    return DivCentered(
        Button("-", {"data-attr-disabled": f"!{Counter.Scan_decrement}"},
               data_on_click=Counter.decrement(), cls=(ButtonT.primary, "size-20 text-3xl")),
        Button("Reset", {"data-attr-disabled": f"!{Counter.Scan_reset}"},
               data_on_click=f"${RESET_DIALOG_SIGNAL} = true", cls=(ButtonT.secondary, "h-20 text-lg")),
        Button("+", data_on_click=Counter.increment(), cls=(ButtonT.primary, "size-20 text-3xl")),
        cls="flex-row space-x-4",
    )


def CounterScreen(counter: Counter):
    return Main(
        counter,
        Div({"data-signals": json.dumps({RESET_DIALOG_SIGNAL: False})}),
        DivCentered(
            H1("Counter App", cls="text-4xl font-bold text-primary"),
            Span(str(counter.read().counter), data_text=Counter.Scounter, cls="text-6xl font-bold text-primary"),
            P("Maximum: ", Span(str(counter.read().max_count), data_text=Counter.Smax_count), cls=TextPresets.muted_sm),
            CounterControls(),
            cls="min-h-screen space-y-4 p-4",
        ),
        ResetConfirmDialog(),
        Notification(),
        id="content",
    )


@rt('/')
def index(req: Request):
    """Counter screen for the current session."""
    counter = Counter.get(req)
    return Title("Counter App"), CounterScreen(counter)
