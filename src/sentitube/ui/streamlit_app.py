"""Streamlit dashboard for SentiTube."""

import logging

import pandas as pd
import plotly.express as px
import streamlit as st

from sentitube.core.aggregation import engagement_rate, likes_vs_dislikes
from sentitube.core.config import settings
from sentitube.core.constants import FileConstants, UIConstants
from sentitube.core.models import Sentiment
from sentitube.core.text import excerpt
from sentitube.services.analyzer import SentimentAnalyzer
from sentitube.services.dashboard import DashboardController
from sentitube.services.youtube_client import YouTubeService

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format=FileConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)

COLORS = UIConstants.SENTIMENT_COLORS
STATIC_CHART = {"displayModeBar": False, "scrollZoom": False}
BADGES = {
    Sentiment.AGREE: ":green-background[agree]",
    Sentiment.DISAGREE: ":red-background[disagree]",
    Sentiment.NEUTRAL: ":gray-background[neutral]",
}

# Page configuration
st.set_page_config(
    page_title=UIConstants.PAGE_TITLE,
    page_icon="📊",
    layout="wide"
)


@st.cache_resource
def get_analyzer() -> SentimentAnalyzer:
    return SentimentAnalyzer()


def get_controller() -> DashboardController:
    """One controller per browser session.

    The YouTube client is not thread-safe, so each session builds its own.
    """
    if "controller" not in st.session_state:
        st.session_state["controller"] = DashboardController(YouTubeService(), get_analyzer())
    return st.session_state["controller"]


def render_stats(controller: DashboardController):
    stats = controller.stats
    if stats.title:
        st.subheader(stats.title)
        if stats.channel_title:
            st.caption(stats.channel_title)

    show_dislikes = settings.show_estimated_dislikes
    cols = st.columns(4 if show_dislikes else 3)
    cols[0].metric("👁️ Views", f"{stats.view_count:,}")
    cols[1].metric("👍 Likes", f"{stats.like_count:,}")
    if show_dislikes:
        cols[2].metric("👎 Dislikes (est.)", f"{stats.dislike_count:,}",
                       help="The API no longer reports dislikes; estimated from likes.")
    cols[-1].metric("💬 Comments", f"{stats.comment_count:,}")


def render_comments(controller: DashboardController):
    st.subheader("Recent Comments")
    if not controller.comments:
        st.write("No comments found.")
        return
    for comment in controller.comments:
        avatar, body = st.columns([1, 12])
        if comment.author_profile_image_url:
            avatar.image(comment.author_profile_image_url, width=40)
        body.write(f"**{comment.author}** · {comment.published_at:%b %d, %Y}")
        body.caption(excerpt(comment.text))
        st.divider()


def render_engagement(controller: DashboardController):
    stats = controller.stats
    left, right = st.columns(2)
    with left:
        st.subheader("Likes vs Dislikes")
        df = pd.DataFrame(likes_vs_dislikes(stats, settings.show_estimated_dislikes))
        fig = px.bar(df, x="name", y="value", color="name",
                     color_discrete_sequence=list(df["color"]))
        fig.update_layout(showlegend=False, xaxis_title=None, yaxis_title=None)
        st.plotly_chart(fig, use_container_width=True, config=STATIC_CHART)
    with right:
        st.subheader("Engagement Rate")
        st.metric("Likes and dislikes per view", f"{engagement_rate(stats):.2f}%")
        st.caption("Total engagement rate based on likes and dislikes")


def render_sentiment(controller: DashboardController):
    report = controller.analysis
    st.header("Comment Sentiment")

    with st.expander("Analysis details"):
        st.write(f"Total Comments: {len(controller.comments)}")
        st.write(f"Analyzed Comments: {len(report.analyzed)}")
        st.write(f"Skipped Comments: {report.skipped}")
        st.json(report.sentiment_stats.as_dict())

    stats = report.sentiment_stats
    left, right = st.columns(2)
    with left:
        st.subheader("Overall Sentiment Distribution")
        pie_df = pd.DataFrame({
            "Sentiment": ["Agree", "Disagree", "Neutral"],
            "Percent": [stats.agree, stats.disagree, stats.neutral],
        })
        fig = px.pie(pie_df, names="Sentiment", values="Percent", hole=0.6,
                     color="Sentiment",
                     color_discrete_map={"Agree": COLORS["agree"], "Disagree": COLORS["disagree"],
                                         "Neutral": COLORS["neutral"]})
        fig.update_traces(textinfo="label+value", texttemplate="%{label}: %{value}%")
        st.plotly_chart(fig, use_container_width=True, config=STATIC_CHART)

    with right:
        st.subheader("Monthly Comment Distribution")
        if report.monthly_stats:
            monthly_df = pd.DataFrame([
                {"month": m.month, "agree": m.agree, "disagree": m.disagree, "neutral": m.neutral}
                for m in report.monthly_stats
            ])
            fig = px.bar(monthly_df, x="month", y=["agree", "disagree", "neutral"],
                         color_discrete_map=COLORS, barmode="stack")
            fig.update_layout(xaxis_title=None, yaxis_title="Comments", legend_title=None)
            st.plotly_chart(fig, use_container_width=True, config=STATIC_CHART)
        else:
            st.info("No analyzed comments to chart.")

    st.subheader("Analyzed Comments")
    for item in report.analyzed:
        avatar, body = st.columns([1, 12])
        if item.comment.author_profile_image_url:
            avatar.image(item.comment.author_profile_image_url, width=40)
        body.write(f"**{item.author}** · {item.published_at:%b %d, %Y}")
        body.write(item.comment.text)
        body.markdown(f"{BADGES[item.sentiment]} {item.analysis}")
        st.divider()


def run_analysis(controller: DashboardController, token: int):
    total = len(controller.comments)
    bar = st.progress(0.0, text=f"Analyzing {total} comments...")

    def progress(done, todo):
        bar.progress(done / max(todo, 1), text=f"Analyzed {done}/{todo} comments")

    controller.run_analysis(token, progress)
    bar.empty()


# Main UI
controller = get_controller()

st.title("📊 SentiTube: YouTube Video Statistics")

with st.form("url_form"):
    st.subheader("Enter YouTube Video URL")
    video_url = st.text_input("Video URL", placeholder=UIConstants.URL_PLACEHOLDER,
                              label_visibility="collapsed")
    submitted = st.form_submit_button("Fetch Stats")

if submitted:
    with st.spinner("Fetching video data..."):
        token = controller.submit(video_url)
    if token is not None and controller.comments:
        run_analysis(controller, token)

if controller.error:
    st.error(controller.error)
if controller.analysis_error:
    st.error(controller.analysis_error)

if controller.stats:
    render_stats(controller)
    render_comments(controller)
    render_engagement(controller)

if controller.analysis:
    render_sentiment(controller)
