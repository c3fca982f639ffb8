"""Calculator page: loan form, EMI result, paginated schedule and breakdown pie."""

import logging

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import plotly.graph_objects as go

from emi_calculator.config import settings
from emi_calculator.dashboard.forms import step_page, validate_form
from emi_calculator.engine.amortization import compute
from emi_calculator.engine.display import format_money
from emi_calculator.engine.pagination import paginate
from emi_calculator.models.loan import InvalidLoanSpec, PaymentFrequency
from emi_calculator.models.results import AmortizationResult, SchedulePage

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/", name="Calculator")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

FREQUENCY_OPTIONS = [
    {"label": "Monthly", "value": PaymentFrequency.MONTHLY.value},
    {"label": "Quarterly", "value": PaymentFrequency.QUARTERLY.value},
    {"label": "Semi-Annual", "value": PaymentFrequency.SEMI_ANNUAL.value},
    {"label": "Yearly", "value": PaymentFrequency.YEARLY.value},
]

PIE_COLORS = ["#4caf50", "#f44336"]


def _result_from_store(loan: dict | None) -> AmortizationResult | None:
    if not loan:
        return None
    return compute(loan["principal"], loan["rate"], loan["tenure"], loan["frequency"])


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"marginBottom": "1rem"})


layout = html.Div([
    dcc.Store(id="loan-store"),
    dcc.Store(id="page-store", data=1),

    html.Div([
        _field(f"Principal Amount ({settings.currency_symbol})",
               dcc.Input(id="principal-input", type="number", min=0, style=FIELD_STYLE)),
        _field("Interest Rate (% per annum)",
               dcc.Input(id="rate-input", type="number", min=0, step=0.01, style=FIELD_STYLE)),
        _field("Loan Tenure (years)",
               dcc.Input(id="tenure-input", type="number", min=0, step=0.5, style=FIELD_STYLE)),
        _field("Payment Frequency", dcc.Dropdown(
            id="frequency-select",
            options=FREQUENCY_OPTIONS,
            value=PaymentFrequency.MONTHLY.value,
            clearable=False,
        )),
        html.P(id="form-error", style={"color": "red", "fontSize": "0.9rem"}),
        html.Button("Calculate EMI", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
    ], style={"backgroundColor": "#f5f5f5", "padding": "1.5rem", "borderRadius": "8px"}),

    html.Div(id="emi-result", style={"marginTop": "1.5rem"}),

    html.Div(id="schedule-section", children=[
        html.H3("Amortization Schedule"),
        _field("Rows per page", dcc.Dropdown(
            id="rows-per-page",
            options=[{"label": str(n), "value": n} for n in settings.rows_per_page_options],
            value=settings.default_rows_per_page,
            clearable=False,
        )),
        html.Div(id="schedule-table"),
        html.Div([
            html.Button("Previous", id="prev-btn", n_clicks=0),
            html.P(id="page-label", style={"margin": "0"}),
            html.Button("Next", id="next-btn", n_clicks=0),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "marginTop": "1rem",
        }),
        html.H3("EMI Breakdown", style={"marginTop": "2rem"}),
        dcc.Graph(id="breakdown-pie"),
    ], style={"display": "none"}),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    [Output("loan-store", "data"), Output("form-error", "children")],
    Input("calculate-btn", "n_clicks"),
    [
        State("principal-input", "value"),
        State("rate-input", "value"),
        State("tenure-input", "value"),
        State("frequency-select", "value"),
    ],
    prevent_initial_call=True,
)
def submit_loan(n_clicks, principal, rate, tenure, frequency):
    error = validate_form(principal, rate, tenure)
    if error:
        return no_update, error

    loan = {"principal": principal, "rate": rate, "tenure": tenure, "frequency": frequency}
    try:
        _result_from_store(loan)
    except InvalidLoanSpec as e:
        logger.info("Rejected loan input: %s", e)
        return no_update, str(e)
    return loan, ""


@callback(
    Output("page-store", "data"),
    [
        Input("prev-btn", "n_clicks"),
        Input("next-btn", "n_clicks"),
        Input("loan-store", "data"),
        Input("rows-per-page", "value"),
    ],
    State("page-store", "data"),
    prevent_initial_call=True,
)
def change_page(prev_clicks, next_clicks, loan, rows_per_page, page):
    result = _result_from_store(loan)
    total_rows = result.number_of_payments if result else 0
    return step_page(dash.ctx.triggered_id, page, total_rows, rows_per_page)


@callback(
    [
        Output("emi-result", "children"),
        Output("schedule-table", "children"),
        Output("page-label", "children"),
        Output("prev-btn", "disabled"),
        Output("next-btn", "disabled"),
        Output("breakdown-pie", "figure"),
        Output("schedule-section", "style"),
    ],
    [Input("loan-store", "data"), Input("page-store", "data"), Input("rows-per-page", "value")],
)
def render_results(loan, page, rows_per_page):
    result = _result_from_store(loan)
    if result is None:
        return None, None, "", True, True, go.Figure(), {"display": "none"}

    schedule_page = paginate(result.schedule, page or 1, rows_per_page)
    return (
        _build_emi_panel(result),
        _build_schedule_table(schedule_page),
        f"Page {schedule_page.page} of {schedule_page.total_pages}",
        not schedule_page.has_previous,
        not schedule_page.has_next,
        _build_breakdown_pie(result),
        {"display": "block", "marginTop": "1.5rem"},
    )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _build_emi_panel(result: AmortizationResult):
    return html.Div([
        html.P(f"Your EMI is: {format_money(result.payment)}",
               style={"fontSize": "1.25rem", "fontWeight": "bold", "margin": "0"}),
        html.P(
            f"{result.number_of_payments} {result.loan.frequency.value} payments · "
            f"Total interest {format_money(result.total_interest)} · "
            f"Total paid {format_money(result.total_paid)}",
            style={"color": "#666", "margin": "0.5rem 0 0"},
        ),
    ], style={"backgroundColor": "#f5f5f5", "padding": "1rem", "borderRadius": "8px"})


def _build_schedule_table(schedule_page: SchedulePage):
    header = html.Tr([html.Th("Period"), html.Th("Principal"), html.Th("Interest"), html.Th("Balance")])
    rows = [
        html.Tr([
            html.Td(r.period),
            html.Td(format_money(r.principal_payment)),
            html.Td(format_money(r.interest_payment)),
            html.Td(format_money(r.remaining_balance)),
        ])
        for r in schedule_page.rows
    ]
    return html.Table(
        [html.Thead(header), html.Tbody(rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )


def _build_breakdown_pie(result: AmortizationResult):
    fig = go.Figure(go.Pie(
        labels=["Principal", "Interest"],
        values=[float(result.total_principal), float(result.total_interest)],
        marker=dict(colors=PIE_COLORS),
        sort=False,
    ))
    fig.update_layout(title="EMI Breakdown")
    return fig
