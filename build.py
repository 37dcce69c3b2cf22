"""
Сборщик SysPulse в exe
"""
import os
import shutil
import subprocess
import sys

def build():
    print("Очистка старых сборок...")
    for folder in ['build', 'dist']:
        if os.path.exists(folder):
            shutil.rmtree(folder)

    print("Сборка exe...")

    exe_name = 'SysPulse.exe' if sys.platform.startswith('win') else 'SysPulse'
    cmd = [
        'pyinstaller',
        '--onefile',
        '--console',
        '--name', 'SysPulse',
        '--hidden-import', 'psutil',
        'main.py'
    ]

    result = subprocess.run(cmd, capture_output=True, text=True)

    if result.returncode == 0:
        print("Сборка завершена!")
        print(f"Исполняемый файл: dist/{exe_name}")

        release_dir = 'release'
        os.makedirs(release_dir, exist_ok=True)

        shutil.copy(os.path.join('dist', exe_name), os.path.join(release_dir, exe_name))

        if os.path.exists('README.md'):
            shutil.copy('README.md', os.path.join(release_dir, 'README.md'))

        print(f"Релиз собран в папке: {release_dir}/")
    else:
        print("Ошибка сборки:")
        print(result.stderr)
        sys.exit(1)

if __name__ == '__main__':
    build()
