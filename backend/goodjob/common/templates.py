from pathlib import Path

from fastapi.templating import Jinja2Templates

# goodjob/templates :: 설치 위치와 무관하게 패키지 기준 경로 사용
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
