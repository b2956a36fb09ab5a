"""Allow `python -m dataverse_trace_client`."""

from dataverse_trace_client.main import main

if __name__ == "__main__":
    raise SystemExit(main())
