"""cli - Click CLI 엔트리포인트 및 콘솔 출력"""
