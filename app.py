"""
Artist Tag Mixer - random weighted artist-tag prompt builder
Main Streamlit application for curating artist tags and combining them into prompts
"""
import streamlit as st

import config
from app_state import TagMixerState
from tag_options import DISTRIBUTION_LABELS, PREFIX_LABELS, PrefixMode, WeightDistribution
from ui_components import clipboard_button, preview_text
from utils_labels import NoValidLabelsError

# Page configuration
st.set_page_config(
    page_title=config.PAGE_TITLE,
    page_icon=config.PAGE_ICON,
    layout="wide"
)

st.markdown(
    """
    <style>
    .stButton > button {
      border-radius: 10px;
      font-weight: 600;
    }
    .stButton > button:hover {
      filter: brightness(0.92);
    }
    </style>
    """,
    unsafe_allow_html=True
)

# Initialize session state
if 'mixer' not in st.session_state:
    st.session_state.mixer = TagMixerState.from_catalog()
if 'upload_key' not in st.session_state:
    st.session_state.upload_key = 0
if 'flash' not in st.session_state:
    st.session_state.flash = None

mixer = st.session_state.mixer


def flash(kind, message):
    """Queue a message to show after the next rerun"""
    st.session_state.flash = (kind, message)


def show_flash():
    if st.session_state.flash:
        kind, message = st.session_state.flash
        getattr(st, kind)(message)
        st.session_state.flash = None


st.title("🎨 Artist Tag Mixer")
st.markdown("Randomly combine artist tags into weighted prompts for image generation")

show_flash()

# Sidebar for the artist list file operations
with st.sidebar:
    st.header("📂 Artist List")
    st.metric("Artist Tags", len(mixer.store))
    st.metric("Selected", mixer.selected_count)

    st.subheader("Import")
    uploaded_file = st.file_uploader(
        "Import tags from file",
        type=config.IMPORT_FILE_TYPES,
        help="Plain text; tags separated by commas or new lines",
        key=f"import_uploader_{st.session_state.upload_key}"
    )
    if uploaded_file is not None and st.button("📥 Import", key="import", use_container_width=True):
        try:
            added = mixer.import_bytes(uploaded_file.getvalue())
        except NoValidLabelsError:
            flash("warning", "No valid artist tags found in the file.")
        except UnicodeDecodeError as e:
            flash("error", f"Could not read the file as text: {e}")
        else:
            flash("success", f"✅ Imported {added} new artist tags.")
            st.session_state.upload_key += 1
        st.rerun()

    st.subheader("Export")
    st.download_button(
        "💾 Export",
        data=mixer.export_text(),
        file_name=config.EXPORT_FILENAME,
        mime=config.EXPORT_MIME,
        use_container_width=True
    )

col_select, col_config = st.columns(2, gap="large")

with col_select:
    st.header("1. Select Artist Tags")

    search_query = st.text_input("Search artists", placeholder="Search artists...", key="search_query")

    with st.form("add_artist", clear_on_submit=True):
        add_col1, add_col2 = st.columns([3, 1])
        with add_col1:
            new_artist = st.text_input("New artist tag", label_visibility="collapsed", placeholder="Add a new artist tag")
        with add_col2:
            submitted = st.form_submit_button("➕ Add", use_container_width=True)
        if submitted:
            if mixer.add_label(new_artist):
                flash("success", f"Added and selected '{new_artist.strip()}'.")
            st.rerun()

    visible = mixer.visible_labels(search_query)

    count_col, select_col, clear_col = st.columns([2, 1, 1])
    with count_col:
        st.caption(f"{mixer.selected_count} selected / {len(visible)} visible")
    with select_col:
        if st.button("Select visible", key="select_visible", use_container_width=True):
            mixer.select_visible(search_query)
            st.rerun()
    with clear_col:
        if st.button("Deselect all", key="deselect_all", use_container_width=True):
            mixer.deselect_all()
            st.rerun()

    with st.container(height=config.ARTIST_LIST_HEIGHT):
        if not visible:
            st.info("No artist tags match your search.")
        for label in visible:
            is_selected = label in mixer.selection
            if st.checkbox(label, value=is_selected) != is_selected:
                mixer.toggle(label)
                st.rerun()

with col_config:
    st.header("2. Combination Settings")
    settings = mixer.settings

    st.subheader("Weight Range")
    min_weight = st.slider(
        "Minimum weight",
        min_value=config.WEIGHT_SLIDER_MIN,
        max_value=config.WEIGHT_SLIDER_MAX,
        value=float(settings.min_weight),
        step=config.WEIGHT_SLIDER_STEP
    )
    max_weight = st.slider(
        "Maximum weight",
        min_value=config.WEIGHT_SLIDER_MIN,
        max_value=config.WEIGHT_SLIDER_MAX,
        value=float(settings.max_weight),
        step=config.WEIGHT_SLIDER_STEP
    )
    mixer.set_min_weight(min_weight)
    mixer.set_max_weight(max_weight)

    distributions = list(WeightDistribution)
    distribution = st.radio(
        "Weight distribution",
        distributions,
        index=distributions.index(settings.distribution),
        format_func=lambda option: DISTRIBUTION_LABELS[option],
        horizontal=True
    )
    mixer.set_distribution(distribution)

    prefix_modes = list(PrefixMode)
    prefix_mode = st.radio(
        f'"{config.ARTIST_PREFIX}" prefix',
        prefix_modes,
        index=prefix_modes.index(settings.prefix_mode),
        format_func=lambda option: PREFIX_LABELS[option],
        horizontal=True
    )
    mixer.set_prefix_mode(prefix_mode)

    st.subheader("Tags per Prompt")
    slider_max = mixer.tag_slider_max
    shown_min = min(settings.min_tags, slider_max)
    shown_max = min(settings.max_tags, slider_max)
    min_tags = st.slider("Minimum tags", min_value=1, max_value=slider_max, value=shown_min, step=1)
    max_tags = st.slider("Maximum tags", min_value=1, max_value=slider_max, value=shown_max, step=1)
    # Moving one bound past the other drags the other bound along
    if min_tags != shown_min:
        mixer.set_min_tags(min_tags)
        st.rerun()
    if max_tags != shown_max:
        mixer.set_max_tags(max_tags)
        st.rerun()

    if st.button(
        "✨ Generate Tags",
        key="generate",
        type="primary",
        disabled=mixer.selected_count == 0,
        use_container_width=True
    ):
        mixer.generate()

    st.header("3. Result")
    st.text_area(
        "Generated prompt",
        value=mixer.current_output,
        height=190,
        disabled=True,
        placeholder="Generated tags will appear here...",
        label_visibility="collapsed"
    )
    clipboard_button(mixer.current_output)

    st.header(f"Recent History (max {config.HISTORY_LIMIT})")
    history = mixer.history.entries
    if not history:
        st.info("No generations yet.")
    else:
        with st.container(height=300):
            for idx, entry in enumerate(history):
                if st.button(preview_text(entry), key=f"history_{idx}", help=entry, use_container_width=True):
                    mixer.select_history(entry)
                    st.rerun()
