"""
Setup helper that downloads the browser used by the rendering fallback.

Run once after installation:

    preview-inspector-install-browser
"""
import subprocess
import sys


def install_browser(browser: str = "chromium") -> int:
    """
    Run ``playwright install`` for the fallback browser.

    Args:
        browser: Playwright browser name to download

    Returns:
        Process exit status (0 on success)
    """
    print("Checking for Playwright installation...")

    try:
        import playwright  # noqa: F401
    except ImportError:
        print(
            "Playwright is not installed. Install it with:\n"
            "  pip install playwright",
            file=sys.stderr
        )
        return 1

    print(f"Running 'playwright install {browser}'...")
    try:
        result = subprocess.run(
            [sys.executable, "-m", "playwright", "install", browser],
            check=True,
            capture_output=True,
            text=True
        )
        if result.stdout:
            print(result.stdout)
        print(f"{browser} browser installed successfully.")
        return 0
    except subprocess.CalledProcessError as e:
        print(f"Error installing {browser} browser for Playwright: {e}", file=sys.stderr)
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        print(
            "Please run the following command manually:\n"
            f"  python -m playwright install {browser}",
            file=sys.stderr
        )
        return e.returncode or 1


def main():
    sys.exit(install_browser(sys.argv[1] if len(sys.argv) > 1 else "chromium"))


if __name__ == "__main__":
    main()
