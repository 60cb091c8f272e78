import os, sys, pdb, json, logging, tempfile
import unittest as test

import yaml

from mambu.apisdk import config as cfgmod
from mambu.apisdk.exceptions import ConfigurationException

tmpdir = tempfile.TemporaryDirectory(prefix="_test_config.")

def tearDownModule():
    tmpdir.cleanup()

class TestLoad(test.TestCase):

    def write(self, name, content):
        path = os.path.join(tmpdir.name, name)
        with open(path, 'w') as fd:
            fd.write(content)
        return path

    def test_load_yaml(self):
        path = self.write("mambu.yml", """
domain: demo.mambu.com
timeout: 30
auth:
  type: userpass
  user: api
  pass: secret
""")
        cfg = cfgmod.load_from_file(path)
        self.assertEqual(cfg['domain'], "demo.mambu.com")
        self.assertEqual(cfg['timeout'], 30)
        self.assertEqual(cfg['auth'], {"type": "userpass", "user": "api", "pass": "secret"})

    def test_load_json(self):
        path = self.write("mambu.json", json.dumps({"domain": "demo.mambu.com",
                                                    "protocol": "http"}))
        cfg = cfgmod.load_from_file(path)
        self.assertEqual(cfg, {"domain": "demo.mambu.com", "protocol": "http"})

    def test_load_empty(self):
        path = self.write("empty.yml", "")
        self.assertEqual(cfgmod.load_from_file(path), {})

    def test_load_errors(self):
        with self.assertRaises(ConfigurationException):
            cfgmod.load_from_file(os.path.join(tmpdir.name, "goober.yml"))

        path = self.write("bad.yml", "domain: [demo.mambu.com\n")
        with self.assertRaises(ConfigurationException) as cm:
            cfgmod.load_from_file(path)
        self.assertIn("syntax", str(cm.exception))

        path = self.write("bad.json", "{ domain: ")
        with self.assertRaises(ConfigurationException):
            cfgmod.load_from_file(path)

        path = self.write("list.yml", "- domain\n- timeout\n")
        with self.assertRaises(ConfigurationException) as cm:
            cfgmod.load_from_file(path)
        self.assertIn("dictionary", str(cm.exception))

class TestParams(test.TestCase):

    def test_merge_config(self):
        defs = { "domain": "demo.mambu.com", "protocol": "https",
                 "auth": { "type": "userpass", "user": "api", "pass": "secret" } }
        over = { "domain": "acme.mambu.com", "auth": { "pass": "s3cret" }, "timeout": 10 }
        out = cfgmod.merge_config(over, defs)
        self.assertEqual(out, { "domain": "acme.mambu.com", "protocol": "https", "timeout": 10,
                                "auth": { "type": "userpass", "user": "api", "pass": "s3cret" } })
        self.assertEqual(defs['auth']['pass'], "secret")
        self.assertEqual(defs['domain'], "demo.mambu.com")

    def test_get_param(self):
        cfg = { "domain": "demo.mambu.com", "timeout": None, "auth": { "type": "apikey", "key": "k" } }
        self.assertEqual(cfgmod.get_param(cfg, "domain"), "demo.mambu.com")
        self.assertEqual(cfgmod.get_param(cfg, "auth.key"), "k")
        self.assertIsNone(cfgmod.get_param(cfg, "auth.user"))
        self.assertEqual(cfgmod.get_param(cfg, "auth.user", "api"), "api")
        self.assertEqual(cfgmod.get_param(cfg, "domain.sub", "x"), "x")
        self.assertIsNone(cfgmod.get_param(cfg, "timeout", 5))

        with self.assertRaises(ConfigurationException):
            cfgmod.get_param(cfg, "auth.user", required=True)
        with self.assertRaises(ConfigurationException):
            cfgmod.get_param(cfg, "timeout", required=True)

class TestConfigureLog(test.TestCase):

    def tearDown(self):
        if cfgmod._log_handler:
            logging.getLogger().removeHandler(cfgmod._log_handler)
            cfgmod._log_handler.close()
            cfgmod._log_handler = None

    def test_configure_log(self):
        cfgmod.configure_log(config={"logdir": tmpdir.name, "logfile": "test.log",
                                     "loglevel": "DEBUG"})
        self.assertEqual(cfgmod.global_logfile, os.path.join(tmpdir.name, "test.log"))
        self.assertEqual(cfgmod.global_logdir, tmpdir.name)
        self.assertEqual(cfgmod._log_handler.level, logging.DEBUG)

        logging.getLogger("mambu.test").debug("hello")
        cfgmod._log_handler.flush()
        with open(cfgmod.global_logfile) as fd:
            self.assertIn("hello", fd.read())

    def test_bad_level(self):
        with self.assertRaises(ConfigurationException):
            cfgmod.configure_log(config={"logdir": tmpdir.name, "loglevel": "LOUD"})


if __name__ == '__main__':
    test.main()
