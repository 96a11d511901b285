from fasthtml.common import *
from monsterui.all import *
from starcounter import Counter, datastar_script, configure_logging, get_config, set_config
from starcounter.adapters.fasthtml import configure_app

from .pages.counter import rt as counter_rt


def create_app(config=None):
    """Build the counter FastHTML app for the given (or global) configuration."""
    config = config or get_config()
    set_config(config)
    configure_logging(config.logging)

    app, rt = fast_app(
        live=config.web.live,
        debug=config.web.debug,
        pico=False,
        secret_key=config.web.secret_key,
        hdrs=(
            Theme.zinc.headers(),
            datastar_script,
        ),
        htmlkw=dict(cls="bg-background font-sans antialiased"),
    )

    configure_app(app, rt, [Counter], config=config)
    counter_rt.to_app(app)
    return app


app = create_app()


if __name__ == "__main__":
    config = get_config()
    serve(appname="app.main", host=config.web.host, port=config.web.port, reload=config.web.live)
