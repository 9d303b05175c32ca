"""
Web application for Pure Pursuit Path Tracking Analysis

Interactive dashboard to run the tracking simulation and compare look-ahead gains.
"""

import logging
from typing import Any, Dict, List

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import numpy as np
import plotly.express as px
import plotly.graph_objs as go

from pursuit import run_gain_analysis, sine_course

logger = logging.getLogger(__name__)


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Pure Pursuit Path Tracking Analysis"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Pure Pursuit Path Tracking Analysis",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                html.Label("Look-ahead Gains k (s, comma-separated):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='gain-input',
                    type='text',
                    value='0.05,0.1,0.3,0.6',
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '30%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Target Speed (km/h):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='speed-input',
                    type='number',
                    value=10.0,
                    min=1.0,
                    max=60.0,
                    step=1.0,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '20%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Time Budget (s):",
                          style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(
                    id='time-input',
                    type='number',
                    value=100.0,
                    min=1.0,
                    max=300.0,
                    step=1.0,
                    style={'width': '100%', 'padding': '8px'}
                ),
            ], style={'width': '20%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Button('Run Simulation', id='run-button',
                       style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                              'backgroundColor': '#4CAF50', 'color': 'white',
                              'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'})
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [State("gain-input", "value"), State("speed-input", "value"), State("time-input", "value")],
)
def update_results(
    n_clicks: int | None, gain_str: str, speed_kmh: float, time_budget: float
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    try:
        gains = sorted({float(s.strip()) for s in gain_str.split(",") if s.strip()})

        if not gains or any(g < 0 for g in gains):
            return [], html.Div(
                "Error: Enter at least one non-negative look-ahead gain.",
                style={"color": "red"},
            )

        if speed_kmh is None or speed_kmh < 1 or speed_kmh > 60:
            return [], html.Div(
                "Error: Target speed must be between 1 and 60 km/h.",
                style={"color": "red"},
            )

        if time_budget is None or time_budget < 1 or time_budget > 300:
            return [], html.Div(
                "Error: Time budget must be between 1 and 300 seconds.",
                style={"color": "red"},
            )

        course = sine_course()
        results = run_gain_analysis(
            gains,
            target_speed=speed_kmh / 3.6,
            max_simulation_time=time_budget,
            course=course,
        )

        status_msg = html.Div(
            f"Simulation complete! Analyzed {len(gains)} look-ahead gains.",
            style={"color": "green"},
        )

        return create_results_layout(results, gains, course), status_msg

    except Exception as e:
        logger.exception("Simulation failed")
        error_msg = f"Error: {str(e)}"
        return [], html.Div(error_msg, style={"color": "red"})


def create_results_layout(
    results: Dict[float, Dict[str, Any]], gains: List[float], course: Any
) -> html.Div:
    """Create the results visualization layout"""
    cx, cy = course

    summary_data: List[Dict[str, Any]] = []
    for gain in gains:
        analysis = results[gain]["analysis"]
        summary_data.append({
            "Gain k (s)": gain,
            "Reached Goal": "Yes" if analysis["reached_goal"] else "No",
            "Max Cross-track (m)": f"{analysis['cross_track_max']:.3f}",
            "RMS Cross-track (m)": f"{analysis['cross_track_rms']:.3f}",
            "Max Steering (deg)": f"{np.degrees(analysis['steering_max']):.1f}",
            "Oscillating": "Yes" if analysis["is_oscillating"] else "No",
        })

    colors = px.colors.qualitative.Set1

    # 1. Driven trajectory over the reference course
    fig1 = go.Figure()
    fig1.add_trace(
        go.Scatter(
            x=cx,
            y=cy,
            mode="markers",
            name="course",
            marker=dict(color="black", size=4),
        )
    )
    for i, gain in enumerate(gains):
        state = results[gain]["state"]
        fig1.add_trace(
            go.Scatter(
                x=state[:, 0],
                y=state[:, 1],
                mode="lines",
                name=f"k={gain}",
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"k={gain}<br>x: %{{x:.2f}}m<br>y: %{{y:.2f}}m<extra></extra>",
            )
        )

    fig1.update_layout(
        title="Trajectory",
        xaxis_title="x (m)",
        yaxis_title="y (m)",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        hovermode="closest",
        height=500,
        template="plotly_white",
    )

    # 2. Speed over time
    fig2 = go.Figure()
    for i, gain in enumerate(gains):
        t = results[gain]["time"]
        v = results[gain]["state"][:, 3] * 3.6  # Convert to km/h
        fig2.add_trace(
            go.Scatter(
                x=t,
                y=v,
                mode="lines",
                name=f"k={gain}",
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"k={gain}<br>Time: %{{x:.2f}}s<br>Speed: %{{y:.2f}}km/h<extra></extra>",
            )
        )

    fig2.update_layout(
        title="Speed Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Speed (km/h)",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 3. Steering angle over time
    fig3 = go.Figure()
    for i, gain in enumerate(gains):
        t = results[gain]["time"]
        delta = np.degrees(results[gain]["steering"])
        fig3.add_trace(
            go.Scatter(
                x=t,
                y=delta,
                mode="lines",
                name=f"k={gain}",
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"k={gain}<br>Time: %{{x:.2f}}s<br>Steering: %{{y:.2f}}°<extra></extra>",
            )
        )

    fig3.update_layout(
        title="Steering Angle Over Time",
        xaxis_title="Time (s)",
        yaxis_title="Steering Angle (degrees)",
        hovermode="closest",
        height=400,
        template="plotly_white",
    )

    # 4. Cross-track error by gain
    fig4 = go.Figure()
    gain_labels = [f"k={g}" for g in gains]
    max_errors = [results[g]["analysis"]["cross_track_max"] for g in gains]
    colors_bar = [
        "green" if results[g]["analysis"]["reached_goal"] else "red" for g in gains
    ]

    fig4.add_trace(
        go.Bar(
            x=gain_labels,
            y=max_errors,
            marker_color=colors_bar,
            text=[f"{e:.2f}m" for e in max_errors],
            textposition="outside",
            hovertemplate="Gain: %{x}<br>Max Cross-track: %{y:.3f}m<extra></extra>",
        )
    )

    fig4.update_layout(
        title="Maximum Cross-track Error by Gain",
        xaxis_title="Look-ahead Gain",
        yaxis_title="Max Cross-track Error (m)",
        height=400,
        template="plotly_white",
    )

    table_rows = [
        html.Tr([html.Th(column) for column in summary_data[0].keys()])
    ] if summary_data else []

    for row in summary_data:
        goal_color = "green" if row["Reached Goal"] == "Yes" else "red"
        table_rows.append(
            html.Tr([
                html.Td(row["Gain k (s)"]),
                html.Td(
                    row["Reached Goal"],
                    style={"color": goal_color, "fontWeight": "bold"},
                ),
                html.Td(row["Max Cross-track (m)"]),
                html.Td(row["RMS Cross-track (m)"]),
                html.Td(row["Max Steering (deg)"]),
                html.Td(row["Oscillating"]),
            ])
        )

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([
                html.Div(
                    [dcc.Graph(figure=fig2)],
                    style={"width": "48%", "display": "inline-block", "marginRight": "2%"},
                ),
                html.Div(
                    [dcc.Graph(figure=fig3)],
                    style={"width": "48%", "display": "inline-block"},
                ),
            ], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig4)], style={"marginBottom": "30px"}),
        ]),
    ])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app.run(debug=True, port=8050)
