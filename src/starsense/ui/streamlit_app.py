"""Simple Streamlit UI for StarSense."""

import logging

import streamlit as st

from starsense.core.config import settings
from starsense.core.constants import ReportConstants
from starsense.core.errors import StarSenseError
from starsense.core.pipeline import run_analysis
from starsense.core.scoring import rank_words
from starsense.core.models import WordSummary
from starsense.services.lexicon import load_resources
from starsense.services.review_loader import load_reviews
from starsense.ui.plots import describe_by_group, plot_sentiment_by_stars, plot_stars_by_score
from starsense.utils.data_prep import result_tables, to_dataframe

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@st.cache_resource
def _resources(lexicon_file, stop_words_file, language):
    return load_resources(lexicon_file, stop_words_file, language)


@st.cache_data
def _reviews(path, max_records, skip_malformed):
    return load_reviews(path, max_records=max_records, skip_malformed=skip_malformed)


# Page configuration
st.set_page_config(
    page_title="StarSense — Review Sentiment",
    page_icon="⭐",
    layout="wide"
)

st.title("⭐ StarSense — Review Sentiment vs. Stars")
st.write("Average AFINN sentiment of each review compared with its star rating, "
         "and a lexicon refined to words with broad support.")

# Sidebar for inputs
with st.sidebar:
    st.header("Data")
    review_file = st.text_input("Review file", value=settings.review_file)
    max_records = st.number_input("Reviews to read", min_value=1, value=settings.max_records, step=10000)
    skip_malformed = st.checkbox("Skip malformed lines", value=settings.skip_malformed)

    st.header("Word support")
    min_reviews = st.slider("Minimum reviews", 0, 1000, settings.min_reviews, step=10)
    min_businesses = st.slider("Minimum businesses", 0, 100, settings.min_businesses)

    run = st.button("Analyze", type="primary")

if run:
    try:
        with st.spinner("Loading lexicon and reviews..."):
            lexicon, stop_words = _resources(settings.lexicon_file, settings.stop_words_file,
                                             settings.afinn_language)
            reviews = _reviews(review_file, int(max_records), skip_malformed)
        result = run_analysis(reviews, stop_words, lexicon,
                              min_reviews=min_reviews, min_businesses=min_businesses,
                              source=review_file)
    except StarSenseError as e:
        logger.error(f"Analysis failed: {e}")
        st.error(str(e))
        st.stop()

    tables = result_tables(result)
    sentiment = tables["review_sentiment"]
    refined = tables["refined_lexicon"]

    col1, col2, col3 = st.columns(3)
    col1.metric("Reviews", result.reviews_loaded)
    col2.metric("Reviews with sentiment", len(result.review_sentiment))
    col3.metric("Refined words", len(result.refined_lexicon))

    left, right = st.columns(2)
    with left:
        st.subheader("Sentiment by star rating")
        st.pyplot(plot_sentiment_by_stars(sentiment))
        st.dataframe(describe_by_group(sentiment, "stars", "sentiment").round(3))
    with right:
        st.subheader("Average stars by AFINN score")
        st.pyplot(plot_stars_by_score(refined))
        st.dataframe(describe_by_group(refined, "score", "average_stars").round(3))

    st.subheader("Most positive and negative words")
    pos_col, neg_col = st.columns(2)
    top = ReportConstants.EXTREME_WORDS
    pos_col.dataframe(to_dataframe(rank_words(result.word_summaries, top), WordSummary), hide_index=True)
    neg_col.dataframe(to_dataframe(rank_words(result.word_summaries, top, ascending=True), WordSummary),
                      hide_index=True)

    with st.expander("Refined lexicon"):
        st.dataframe(refined, hide_index=True)
else:
    st.info("Choose a review file and thresholds, then press Analyze.")
