import streamlit as st
import time
import numpy as np
from find_motion.motion_config import MSTEP
from find_motion.pipeline import run_motion_estimation, MonotonicClock
from find_motion.utils.frame_io import decode_image
from find_motion.utils.report import format_motion_vectors, format_report, draw_motion_vectors


class StreamlitStatusPort:
    """Shows the computation status in the page instead of an LED."""

    def __init__(self, placeholder):
        self.placeholder = placeholder

    def on(self):
        self.placeholder.info("Estimating motion ...")

    def off(self):
        self.placeholder.empty()


st.title("Find Motion")

col_prev, col_curr = st.columns(2)
with col_prev:
    prev_file = st.file_uploader("Previous frame", type=["pgm", "pnm", "png", "jpg"])
with col_curr:
    curr_file = st.file_uploader("Current frame", type=["pgm", "pnm", "png", "jpg"])

# Sidebar: options
st.sidebar.header("Settings")
with st.sidebar.expander("Options", expanded=False):
    denoise = st.checkbox("3x3 Median Filter", value=True)
    num_workers = st.slider("Worker Threads", min_value=1, max_value=16, value=4, step=1)
    arrow_scale = st.slider("Arrow Scale", min_value=1, max_value=4, value=2, step=1)


if prev_file is not None and curr_file is not None:
    try:
        prev_frame = decode_image(prev_file.read())
        curr_frame = decode_image(curr_file.read())
    except IOError as e:
        st.error(f"Error: cannot read input image ({e})")
        st.stop()

    if prev_frame.shape != curr_frame.shape:
        st.error("Error: Image sizes of the two frames do not match!")
        st.stop()

    original = curr_frame.copy()
    status = StreamlitStatusPort(st.empty())

    start_time = time.time()
    try:
        result = run_motion_estimation(
            prev_frame,
            curr_frame,
            status=status,
            clock=MonotonicClock(),
            denoise=denoise,
            num_workers=num_workers
        )
    except ValueError as e:
        st.error(f"Error: {e}")
        st.stop()

    st.success(f"Motion estimation complete! Process completed in {time.time()-start_time:.2f} seconds")

    mean, minimum, maximum = result.statistics
    m1, m2, m3 = st.columns(3)
    m1.metric("Mean", f"{mean:.1f} px")
    m2.metric("Min", f"{minimum:.1f} px")
    m3.metric("Max", f"{maximum:.1f} px")

    st.markdown("**Motion Vectors**")
    arrows = draw_motion_vectors(original, result.field, MSTEP, scale=arrow_scale)
    st.image(arrows, channels="BGR")

    st.markdown("**Motion Vector Field**")
    st.code(format_motion_vectors(result.field) + "\n" +
            format_report(result.statistics, result.filter_usec, result.estimate_usec))

    st.download_button(
        label="Download Motion Field",
        data=np.ascontiguousarray(result.field).tobytes(),
        file_name="motion_field.bin",
        mime="application/octet-stream"
    )
