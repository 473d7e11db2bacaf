import logging

import streamlit as st
from rantme.ui import render_app

st.set_page_config(page_title="RantMe", page_icon="🗯️", layout="wide")

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

def main():
    render_app()

if __name__ == "__main__":
    main()
