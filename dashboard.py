import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

# --- IMPORTACIÓN DIRECTA ---
# Usamos la lógica de servicios sin necesitar el servidor API encendido
from playarena.core.database import SessionLocal, init_db
from playarena.repositories.match_repository import MatchRepository
from playarena.repositories.team_repository import TeamRepository
from playarena.services.scorecard import describe_result, innings_tables, match_label
from playarena.services.standings import build_league_table
from playarena.services.team_stats import compute_team_stats, match_payload

# --- CONFIGURACIÓN ---
st.set_page_config(page_title="PlayArena Cricket", layout="wide", page_icon="🏏")


# --- FUNCIONES DE CARGA ---
@st.cache_data(ttl=600)
def load_league():
    """Devuelve (clasificación, partidos completados como dicts JSON)."""
    init_db()
    db = SessionLocal()
    try:
        teams = TeamRepository(db).list()
        matches = MatchRepository(db).list(status="completed")
        table = build_league_table(teams, matches)
        # Pasamos a dicts planos para que st.cache_data pueda serializarlos
        match_dicts = [
            {
                "id": m.id,
                "title": m.title,
                "status": m.status,
                "scheduledAt": m.scheduled_at,
                "team1Name": m.team1_name,
                "team2Name": m.team2_name,
                "matchData": m.match_data,
            }
            for m in matches
        ]
        return table, match_dicts
    except Exception as e:
        st.error(f"Error calculando la clasificación: {e}")
        return pd.DataFrame(), []
    finally:
        db.close()


def draw_results_chart(stats, team_name):
    fig = go.Figure(go.Pie(
        labels=["Victorias", "Derrotas", "Empates"],
        values=[stats.matches_won, stats.matches_lost, stats.matches_drawn],
        hole=0.5,
        marker=dict(colors=["#00CC96", "#EF553B", "#AB63FA"]),
    ))
    fig.update_layout(
        title=dict(text=f"Resultados: {team_name}", x=0.5),
        height=380,
        margin=dict(t=40, b=20, l=20, r=20),
        template="plotly_dark",
    )
    return fig


def show_innings(label, innings_list):
    st.markdown(f"#### {label}")
    tables = innings_tables(innings_list)
    if not tables:
        st.caption("Sin datos de innings.")
        return
    for t in tables:
        summary = t["summary"]
        st.markdown(
            f"**{summary['score']}** · Run rate: {summary['runRate']} · Extras: {summary['extras']}"
        )
        st.dataframe(t["batting"], use_container_width=True, hide_index=True)
        st.dataframe(t["bowling"], use_container_width=True, hide_index=True)


# --- DATOS ---
table, matches = load_league()

if table.empty:
    st.warning("No hay equipos en la base de datos. Ejecuta seed.py para cargar datos de ejemplo.")
    st.stop()

# --- CLASIFICACIÓN ---
st.title("🏏 PlayArena: Liga de Críquet")
st.markdown(f"**{len(table)}** equipos | **{len(matches)}** partidos completados")
st.divider()

cols_show = ["position", "team_name", "total_matches", "matches_won", "matches_lost",
             "matches_drawn", "win_rate", "tournament_points", "net_run_rate"]
st.dataframe(
    table[cols_show].style.format({"win_rate": "{:.1f}%", "net_run_rate": "{:+.3f}"}),
    use_container_width=True,
    hide_index=True,
)

fig_points = px.bar(
    table,
    x="team_name",
    y="tournament_points",
    color="net_run_rate",
    title="Puntos de torneo",
    template="plotly_dark",
    height=400,
)
st.plotly_chart(fig_points, width="stretch")

# --- FICHA DE EQUIPO ---
st.divider()
st.subheader("📈 Ficha de Equipo")

team_names = dict(zip(table["team_name"], table["team_id"]))
team_sel = st.sidebar.selectbox("Equipo", sorted(team_names))
team_id = team_names[team_sel]
stats = compute_team_stats(team_id, matches)

col1, col2, col3, col4 = st.columns(4)
col1.metric("Partidos", stats.total_matches)
col2.metric("Victorias", stats.matches_won)
col3.metric("% Victorias", f"{stats.win_rate:.1f}%")
col4.metric("Puntos", stats.tournament_points)

if stats.total_matches:
    st.plotly_chart(draw_results_chart(stats, team_sel), width="stretch")
else:
    st.info("Este equipo todavía no tiene partidos con resultado.")

# --- SCORECARD ---
st.divider()
st.subheader("📋 Scorecard")

if not matches:
    st.info("No hay partidos completados.")
    st.stop()

labels = {match_label(m): m for m in matches}
match_sel = labels[st.selectbox("Selecciona un partido", list(labels))]

st.success(describe_result(match_sel))
scorecard = match_payload(match_sel).get("scorecard") or {}
if not scorecard:
    st.warning("⚠️ Este partido no tiene scorecard registrado.")
else:
    col_izq, col_der = st.columns(2)
    with col_izq:
        show_innings(match_sel["team1Name"], scorecard.get("team1Innings"))
    with col_der:
        show_innings(match_sel["team2Name"], scorecard.get("team2Innings"))
