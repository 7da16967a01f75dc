# product_api/browser.py

import streamlit as st
import requests
import pandas as pd
from product_api.config import API_URL, DEFAULT_LIMIT, MAX_LIMIT
from product_api.models import PaginatedResponse
from product_api.logger import configure_logging, get_logger

# Create logger object
log = get_logger(__name__)


def fetch_products_page(api_url: str, page: int, limit: int, timeout: float = 10) -> PaginatedResponse:
	"""
	Call GET /products and parse the envelope.

	Raises:
		requests.exceptions.RequestException: connection problems or non 2xx status
	"""
	log.info(f"Requesting {api_url}/products page={page} limit={limit}")
	response = requests.get(f"{api_url}/products", params={"page": page, "limit": limit}, timeout=timeout)
	response.raise_for_status()
	return PaginatedResponse.model_validate(response.json())


def products_dataframe(result: PaginatedResponse) -> pd.DataFrame:
	"""One row per product, columns in API order"""
	columns = list(result.products[0].model_dump().keys()) if result.products else []
	return pd.DataFrame([p.model_dump() for p in result.products], columns=columns)


def main():
	configure_logging()
	log.info("Streamlit product browser is starting...")

	# Page settings
	st.set_page_config(
		page_title="Product Catalog",
		page_icon="🛒",
		layout="wide"
	)
	st.title("Product Catalog")

	initialize_sessions()

	# Sidebar: page controls
	st.sidebar.header("📄 Pagination")
	st.sidebar.number_input("Items per page", min_value=1, max_value=MAX_LIMIT, step=1, key="limit", on_change=reset_page)
	st.sidebar.number_input("Page", min_value=1, step=1, key="page")

	try:
		result = fetch_products_page(API_URL, st.session_state.page, st.session_state.limit)
	except requests.exceptions.Timeout as e:
		st.error("API call timed out.")
		log.error(f"Streamlit request Timeout: {e}")
		return
	except requests.exceptions.ConnectionError as e:
		st.error("Unable to connect to API.")
		log.error(f"Streamlit connection error: {e}")
		return
	except requests.exceptions.HTTPError as e:
		st.error(f"API returned an error: {e.response.status_code}")
		log.error(f"API returned unexpected status code {e.response.status_code}. Response: {e.response.text}")
		return

	with st.sidebar:
		st.markdown("---")
		st.metric("Total Products", result.count)
		st.metric("Total Pages", result.total_pages)

	if not result.products:
		st.info("No products on this page.")
		return

	st.markdown(f"### Page {result.page} of {result.total_pages}")
	df = products_dataframe(result)
	st.dataframe(df, use_container_width=True, hide_index=True)

	st.download_button(
		label = "📥 Download Page as CSV File",
		data = df.to_csv(index=False).encode("utf-8"),
		file_name = f"products_page_{result.page}.csv",
		mime = "text/csv"
	)


def initialize_sessions():
	"""Initialize session state variables."""
	if "page" not in st.session_state:
		st.session_state.page = 1
		log.debug("Session state 'page' initialized.")
	if "limit" not in st.session_state:
		st.session_state.limit = DEFAULT_LIMIT
		log.debug("Session state 'limit' initialized.")


def reset_page():
	st.session_state.page = 1

if __name__ == "__main__":
	main()
