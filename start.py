#!/usr/bin/env python3
"""
Startup script for the Family-Care Leave Subsidy Eligibility Service
"""
import subprocess
import sys
from pathlib import Path


def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# Application Configuration
CARELEAVE_APP_NAME=Family-Care Leave Subsidy Eligibility Service
CARELEAVE_APP_VERSION=1.0.0
CARELEAVE_DEBUG=true
CARELEAVE_LOG_LEVEL=INFO

# API Configuration
CARELEAVE_API_PREFIX=/api/v1
CARELEAVE_CORS_ORIGINS=http://localhost:3000,http://localhost:8080

# Subsidy order
CARELEAVE_SUBSIDY_ORDER_YEAR=2025
# CARELEAVE_SUBSIDY_ORDERS_FILE=/path/to/subsidy_orders.json

# Evaluation policy
CARELEAVE_HOSPITALIZATION_BLOCKING=true
CARELEAVE_BASE_AGE_LIMIT=6
CARELEAVE_EXTENDED_AGE_LIMIT=9
CARELEAVE_DISABILITY_THRESHOLD=33
CARELEAVE_MINIMUM_FOSTER_MONTHS=12
"""

        with open(env_path, 'w') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")


def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .")
        return False


def run_tests():
    """Run the test suite"""
    print("🧪 Running tests...")

    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ Tests passed successfully")
            return True
        else:
            print(f"❌ Tests failed:\n{result.stdout}")
            return False
    except Exception as e:
        print(f"❌ Failed to run tests: {e}")
        return False


def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'careleave.main:app',
            '--host', '0.0.0.0',
            '--port', '8000',
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")


def main():
    """Main startup function"""
    print("🏛️  Family-Care Leave Subsidy Eligibility Service")
    print("=" * 50)

    if not Path("careleave").exists():
        print("❌ Please run this script from the repository root")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        print("\n📦 Please install dependencies first:")
        print("   pip install -e .[test]")
        sys.exit(1)

    if not run_tests():
        print("\n⚠️  Some tests failed. The application may not work correctly.")

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Review the evaluation policy in .env")
    print("2. Visit http://localhost:8000/docs for API documentation")
    print("3. Evaluate scenarios using the /api/v1/evaluation endpoints")

    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn careleave.main:app --reload")


if __name__ == "__main__":
    main()
