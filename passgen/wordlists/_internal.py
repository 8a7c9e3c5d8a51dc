"""Bundled word list: base64-encoded gzip of newline-separated words."""

DICT_STORED = (
    "H4sIAAAAAAACAzWW25LEJgxE3/lLGWObHUCEiyeer88RrtRW0QMWILVaYmVLwcmmczB2bZsTL3vI"
    "D+h1Fpa9tsLYtHdgRLXZ0OZkl8r3PccmCbyj56zQos2OQ9vu5AxlFyexVW3YJmmZcZs2er2xT1kL"
    "hqnGwixvgYOLv+z8cppzJWY7sHzWpH+XwbgCR9Rqa7WZS838NrjMoIXCtS37i7v50fTLOGLHiV4D"
    "9iMJ8YwRvZM5ZmbpDmVyxLfEcrpN9jMwfkJ7gIRTNsXrYvO8qQKFP4PCpRvXhAT0TxjAGGtrgMFi"
    "cJtN2Jv6DxgGvm/RP35h9zOyiWvW5gTbmt2mY5npTLvtbuLX52YUASH8+NrichUabDZfk3kcknBx"
    "lt1OmOaN87LFwujH7EAOTYBlATxq35rcsnB7p5XTvPSxbMYLhMK3sAtHhpQW5IBa4Dt9bISRZFjX"
    "teQEKvwVcwlgbBa0jyP+SIVnP8lncyLVgw9JjSuv0M2qwt80zGGNVVAiaz40m9e6bE2DHrrMaZ2n"
    "uWT6tWubrMhaXMz49vRhxrNuKojUzzbEaJn9MnXvcp4cuVvGDWJ/3K6pXtjsmmNRgDSx2uS0DU1M"
    "lftTJKsLYrINqO1i7NAQCKx21tKGDEN6qQIrPPHD0pB2F8ppNRDKHZLW4I4lNncEGabpY3F4xN2y"
    "dcRzNkBbQNIHaokJIGCL5MCvdcfRgre6OdHvvw/QdggHErI/5Ufu+BhyhzZ+oHsuOqnn42CaxEeb"
    "K01iuBNhEMyJTiH3QklDBphxH0AuC25z6LKj3RWSpQznM9q+oF+J4Irn9RVQU4IOKj3+CBM0DdBD"
    "aAGni2eiwGLpwbPYqYvdxdv2/7018CfnxI8/6dlY+4tnl6/709lMYn9zNQ8MTbAfAiNz4ECKxXAA"
    "SXarqkQS1WZlmKzTagrBkSZb5YRps0jRcXvC+3Hp7Lb0M/kkXf6kuXpXltPCyNCiCCDTxJTRGlWG"
    "I4MgO3Fnkrw/QMsSd3AECKSXtgXLQRzo5lrWLiQs/5/fTHEv6IFOWqQSoCthm0mAYAIpJvbkiuqa"
    "6Qg0rI+jkHI4nUqP3akPVLrSzCvtQFOkH2uxEqCakAJAkhmpYwI1xFNdnUQpIqDKkmNFX96gLKlW"
    "qfII0OgOBk2Hq2Gz8GtAe1xLE/ZotoZVvzUKZVXjGbi9xqWMig7pBpXEwCjw3vjSXd/A7FlpEm2O"
    "Gjlh5kVGnb+ffX6aZHz+B6mQPIPxAyJ9pclm0TV76Li0iXUzxtgvIBarVZM8n4K3x6zFzVpii9ac"
    "2utGf+Pv6xkDeO0SYDIznNZBOk30YFQ1/zs9wUyvpYKO3VqNZ7GdMdnh/QMDdnp9X65eowm1V7Ws"
    "dPxfLw1tbI8IABw8XNCzKO0zW731SfEAX1lsDllVzJaqeDyCQBmQTZqDzrwt5LngpvG2yhGXpodm"
    "45Y3v+C0g/D1/g98SMhoNEg360mbY1ytf9BUOZCiMCtxE0HaPxI33lCfdJKbLXdEdSxq8pb/Wx/+"
    "Y3Bf2k8ysOaK+9b9gYZIv7L8+15xPUjfVynfWPYXjMvvW5eP0iKH+wUKl7FeT3O/uNT2H5H35nn2"
    "CAAA"
)
