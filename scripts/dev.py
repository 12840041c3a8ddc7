import os
import uvicorn
from dotenv import load_dotenv

def main():
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    dotenv_path = os.path.join(base_dir, '.env')
    print(f"Loading env from {dotenv_path}...")
    load_dotenv(dotenv_path)

    api_url = os.environ.get("AGULI_API_URL")
    print(f"AGULI_API_URL: {api_url}" if api_url else "AGULI_API_URL: NOT FOUND (using http://localhost:3000)")

    port = int(os.environ.get("PORT", "8000"))
    print(f"Starting dashboard at http://0.0.0.0:{port}")
    uvicorn.run("aguli_admin.main:app", host="0.0.0.0", port=port, reload=False)

if __name__ == "__main__":
    main()
