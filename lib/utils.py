import os
import yaml

from bs4 import BeautifulSoup

def create_folders(dir_):
    if not os.path.exists("{}".format(dir_)):
        return os.makedirs("{}".format(dir_))

    return True

def get_size(filename):
    if not os.path.exists(filename):
        return None

    return os.path.getsize(filename)

def read_yaml(file_path):
    with open(file_path, "r") as f:
        return yaml.safe_load(f)

def read_file(file_path):
    with open(file_path, "r", encoding="utf8") as f:
        return f.read()

# Overwrites any previous content
def write_file(file_path, data):
    create_folders(os.path.dirname(os.path.abspath(file_path)))
    with open(file_path, "w", encoding="utf8") as f:
        f.write(data)

# Text content of an HTML fragment, with entities decoded
def strip_tags(html_str):
    return BeautifulSoup(html_str, 'html.parser').get_text()
