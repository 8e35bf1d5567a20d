import streamlit as st
import pandas as pd
import requests
import base64

from config import API_BASE_URL

# ========================
# CONFIG
# ========================
BASE_URL = API_BASE_URL

st.set_page_config(
    page_title="Data Visualizer - Streamlit",
    layout="wide"
)

CHART_KINDS = {"bar": "Bar Chart", "line": "Line Chart", "pie": "Pie Chart"}

# ========================
# STATE VARIABLES
# ========================
if "dataset" not in st.session_state:
    st.session_state.dataset = None

if "last_upload" not in st.session_state:
    st.session_state.last_upload = None


def _store_summary(resp):
    if resp.status_code != 200:
        st.error(f"Error parsing CSV file. Please check the file format. {resp.text}")
        return
    st.session_state.dataset = resp.json()


# Title
st.title("Data Visualizer")

# 1. SIDEBAR: DATA SOURCE + CHART TYPE
with st.sidebar:
    st.header("Upload Data")

    uploaded_file = st.file_uploader("Drag & drop your CSV file here", type=["csv"])
    if uploaded_file is not None and uploaded_file.file_id != st.session_state.last_upload:
        files = {"file": (uploaded_file.name, uploaded_file.getvalue(), "text/csv")}
        _store_summary(requests.post(f"{BASE_URL}/upload/csv", files=files))
        st.session_state.last_upload = uploaded_file.file_id

    if st.button("Load Sample Data"):
        _store_summary(requests.post(f"{BASE_URL}/upload/sample"))

    sample_resp = requests.get(f"{BASE_URL}/upload/sample.csv")
    if sample_resp.status_code == 200:
        st.download_button(
            "Download Sample CSV",
            data=sample_resp.content,
            file_name="sample-data.csv",
            mime="text/csv",
        )

    dataset = st.session_state.dataset
    if dataset and dataset["display_name"]:
        st.success(f"File: {dataset['display_name']}\n\nRows: {dataset['n_rows']}")

    st.header("Chart Type")
    current_kind = dataset["chart_kind"] if dataset else "bar"
    kinds = list(CHART_KINDS)
    selected_kind = st.radio(
        "Chart Type",
        kinds,
        index=kinds.index(current_kind),
        format_func=CHART_KINDS.get,
        label_visibility="collapsed",
    )
    if dataset and selected_kind != current_kind:
        _store_summary(requests.post(f"{BASE_URL}/data/chart-kind", json={"chart_kind": selected_kind}))

# 2. CHART
st.header("Chart Visualization")

chart = requests.get(f"{BASE_URL}/data/chart", params={"render": "true"}).json()

if chart["status"] == "empty":
    st.caption("Upload a CSV file to see the chart")
elif chart["status"] == "no_suitable_columns":
    st.caption("No suitable columns found for charting")
elif chart.get("image_base64"):
    st.image(base64.b64decode(chart["image_base64"]), use_container_width=True)
else:
    st.error("Chart could not be rendered.")

# 3. DATA PREVIEW
st.header("Data Preview")

preview = requests.get(f"{BASE_URL}/data/preview").json()
if preview["rows"]:
    st.dataframe(pd.DataFrame(preview["rows"], columns=preview["columns"]), use_container_width=True)
else:
    st.caption("No data loaded yet")
