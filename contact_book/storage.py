"""Whole-file persistence for the contact list.

Every request loads the complete collection, mutates it in memory and writes
it back in one piece. There is no locking: two requests saving at the same
time race and the last writer wins.
"""
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod

import yaml

from .models import Contact

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """A data file is missing or cannot be parsed."""


class ContactRepository(ABC):
    @abstractmethod
    def load(self):
        """Return every stored contact in file order."""

    @abstractmethod
    def save(self, contacts):
        """Replace the stored collection with `contacts`."""


def read_yaml(path):
    try:
        with open(path, encoding='utf-8') as f:
            return yaml.safe_load(f)
    except FileNotFoundError as exc:
        logger.error('Data file %s does not exist', path)
        raise StorageError(f'data file not found: {path}') from exc
    except yaml.YAMLError as exc:
        logger.error('Data file %s is not valid YAML: %s', path, exc)
        raise StorageError(f'data file is malformed: {path}') from exc


def write_yaml(path, data):
    # write next to the target, then swap it in so readers never see half a file
    directory = os.path.dirname(os.path.abspath(path))
    prefix = '.' + os.path.basename(path) + '-'
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=prefix, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False, allow_unicode=True)
        # mkstemp files are 0600; keep whatever mode the target already had
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


class YamlContactRepository(ContactRepository):
    def __init__(self, path):
        self.path = path

    def load(self):
        data = read_yaml(self.path)
        if not isinstance(data, list):
            logger.error('Data file %s does not hold a list of contacts', self.path)
            raise StorageError(f'expected a list of contacts in {self.path}')
        try:
            return [Contact.from_dict(record) for record in data]
        except (KeyError, TypeError) as exc:
            logger.error('Data file %s holds an incomplete contact record', self.path)
            raise StorageError(f'malformed contact record in {self.path}') from exc

    def save(self, contacts):
        write_yaml(self.path, [contact.to_dict() for contact in contacts])
        logger.debug('Saved %d contacts to %s', len(contacts), self.path)


def create_empty(path):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    write_yaml(path, [])
