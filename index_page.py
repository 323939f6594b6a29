import html


INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PDF to TXT Batch Converter</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            padding: 20px;
        }
        .container {
            max-width: 1000px;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            box-shadow: 0 10px 40px rgba(0,0,0,0.2);
            overflow: hidden;
        }
        .header {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 30px;
            text-align: center;
        }
        .header h1 { font-size: 28px; margin-bottom: 10px; }
        .header p { opacity: 0.9; font-size: 14px; }
        .main { padding: 30px; }
        .section { margin-bottom: 30px; }
        .section-title { font-size: 18px; font-weight: 600; margin-bottom: 15px; color: #333; }
        .input-group { margin-bottom: 15px; }
        .input-group label { display: block; margin-bottom: 8px; font-size: 14px; font-weight: 500; color: #555; }
        .input-group input {
            width: 100%;
            padding: 12px 15px;
            border: 1px solid #e0e0e0;
            border-radius: 6px;
            font-size: 14px;
            font-family: monospace;
        }
        .input-group input:focus { outline: none; border-color: #667eea; }
        .btn {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            border: none;
            padding: 14px 30px;
            border-radius: 6px;
            font-size: 16px;
            font-weight: 600;
            cursor: pointer;
            width: 100%;
            transition: transform 0.2s;
        }
        .btn:hover { transform: translateY(-2px); }
        .btn:disabled { opacity: 0.6; cursor: not-allowed; transform: none; }
        .loading { display: none; text-align: center; padding: 20px; color: #667eea; }
        .loading.show { display: block; }
        .spinner {
            border: 3px solid #f3f3f3;
            border-top: 3px solid #667eea;
            border-radius: 50%;
            width: 40px;
            height: 40px;
            animation: spin 1s linear infinite;
            margin: 0 auto 15px;
        }
        @keyframes spin {
            0% { transform: rotate(0deg); }
            100% { transform: rotate(360deg); }
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>PDF to TXT Batch Converter</h1>
            <p>Pick a folder containing PDF files and convert them all to text in one go</p>
        </div>

        <div class="main">
            <div class="section">
                <div class="section-title">1. Select PDF files</div>
                <input type="file" id="folderInput" webkitdirectory directory multiple style="display: none;" onchange="handleFolderSelect()">
                <button class="btn" onclick="document.getElementById('folderInput').click()" style="margin-bottom: 20px;">
                    Choose a folder
                </button>
                <div id="fileInfo" style="display: none; padding: 15px; background: #f0f7ff; border-radius: 6px; margin-bottom: 20px;">
                    <div style="font-weight: 600; margin-bottom: 8px;"><span id="pdfCount">0</span> PDF file(s) selected</div>
                    <div style="font-size: 13px; color: #666; max-height: 150px; overflow-y: auto;" id="fileList"></div>
                </div>
            </div>

            <div class="section" id="outputSection" style="display: none;">
                <div class="section-title">2. Choose output</div>
                <div style="margin-bottom: 20px;">
                    <label style="display: block; margin-bottom: 10px; cursor: pointer;">
                        <input type="radio" name="outputMode" value="download" checked onchange="toggleOutputMode()">
                        <span style="margin-left: 8px;">Download as a ZIP file (browser download folder)</span>
                    </label>
                    <label style="display: block; cursor: pointer;">
                        <input type="radio" name="outputMode" value="local" onchange="toggleOutputMode()">
                        <span style="margin-left: 8px;">Save to a local folder and open it</span>
                    </label>
                </div>
                <div id="localOutputOptions" style="display: none;">
                    <div class="input-group">
                        <label>Output folder (leave empty to use the default folder on the Desktop)</label>
                        <input type="text" id="localOutputDir" placeholder="Default: ~/Desktop/__DEFAULT_FOLDER__">
                    </div>
                </div>
            </div>

            <div class="section">
                <button class="btn" onclick="startProcess()" id="processBtn" style="display: none;">
                    Start conversion
                </button>
            </div>

            <div class="loading" id="loading">
                <div class="spinner"></div>
                <div>Converting, please wait...</div>
            </div>
        </div>
    </div>

    <script>
        let selectedFiles = [];

        function toggleOutputMode() {
            const mode = document.querySelector('input[name="outputMode"]:checked').value;
            document.getElementById('localOutputOptions').style.display = mode === 'local' ? 'block' : 'none';
        }

        function handleFolderSelect() {
            const input = document.getElementById('folderInput');
            selectedFiles = Array.from(input.files).filter(file => file.name.toLowerCase().endsWith('.pdf'));

            if (selectedFiles.length === 0) {
                alert('No PDF files found in the selected folder');
                return;
            }

            document.getElementById('pdfCount').textContent = selectedFiles.length;
            const fileList = document.getElementById('fileList');
            fileList.innerHTML = '';
            selectedFiles.forEach(file => {
                const div = document.createElement('div');
                div.textContent = file.webkitRelativePath || file.name;
                div.style.padding = '3px 0';
                fileList.appendChild(div);
            });

            document.getElementById('fileInfo').style.display = 'block';
            document.getElementById('outputSection').style.display = 'block';
            document.getElementById('processBtn').style.display = 'block';
        }

        function startProcess() {
            const mode = document.querySelector('input[name="outputMode"]:checked').value;
            if (mode === 'download') {
                uploadAndConvert();
            } else {
                uploadAndSaveLocal();
            }
        }

        function setBusy(busy) {
            document.getElementById('processBtn').disabled = busy;
            document.getElementById('loading').classList.toggle('show', busy);
        }

        async function errorMessage(response) {
            try {
                const body = await response.json();
                return body.detail || response.statusText;
            } catch (e) {
                return response.statusText;
            }
        }

        async function uploadAndConvert() {
            if (selectedFiles.length === 0) {
                alert('Please select a folder containing PDF files first');
                return;
            }

            const formData = new FormData();
            selectedFiles.forEach(file => formData.append('files', file));

            setBusy(true);
            try {
                const response = await fetch('/api/upload-convert', { method: 'POST', body: formData });
                if (!response.ok) {
                    throw new Error(await errorMessage(response));
                }

                const blob = await response.blob();
                const url = window.URL.createObjectURL(blob);
                const a = document.createElement('a');
                a.href = url;
                a.download = 'converted-texts.zip';
                document.body.appendChild(a);
                a.click();
                window.URL.revokeObjectURL(url);
                document.body.removeChild(a);

                alert('Done! The ZIP file was saved to your browser download folder.');
            } catch (error) {
                alert('Conversion failed: ' + error.message);
            } finally {
                setBusy(false);
            }
        }

        async function uploadAndSaveLocal() {
            if (selectedFiles.length === 0) {
                alert('Please select a folder containing PDF files first');
                return;
            }

            const formData = new FormData();
            selectedFiles.forEach(file => {
                formData.append('files', file);
                // relative path lets the server rebuild the folder structure
                formData.append('paths', file.webkitRelativePath || file.name);
            });

            const outputDir = document.getElementById('localOutputDir').value;
            if (outputDir) {
                formData.append('outputDir', outputDir);
            }

            setBusy(true);
            try {
                const response = await fetch('/api/upload-save-local', { method: 'POST', body: formData });
                if (!response.ok) {
                    throw new Error(await errorMessage(response));
                }
                const result = await response.json();

                alert('Done!\\n\\n' +
                      'Converted: ' + result.successCount + ' file(s)\\n' +
                      'Failed: ' + result.failedCount + ' file(s)\\n\\n' +
                      'Saved to: ' + result.outputPath);
            } catch (error) {
                alert('Conversion failed: ' + error.message);
            } finally {
                setBusy(false);
            }
        }
    </script>
</body>
</html>
"""


def render_index(default_folder: str) -> str:
    return INDEX_HTML.replace("__DEFAULT_FOLDER__", html.escape(default_folder))
