"""Plotly Dash application for the EMI calculator."""

from dash import Dash, html, page_container

from emi_calculator.config import configure_logging, settings

configure_logging()

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="EMI Calculator",
)

app.layout = html.Div([
    html.Nav([
        html.H1("EMI Calculator", style={"fontSize": "1.5rem", "margin": "0"}),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem",
        "marginBottom": "2rem",
    }),

    html.Div(
        page_container,
        style={"maxWidth": "900px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
