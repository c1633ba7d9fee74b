from create_expo_module.cli import app

app(prog_name="create-expo-module")
