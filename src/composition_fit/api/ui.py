"""Single-page form for entering measurements and reading predictions."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def experiment_page() -> HTMLResponse:
    """Form page that drives the session API and draws the chart."""
    return HTMLResponse(_EXPERIMENT_PAGE_HTML)


_EXPERIMENT_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Protein-Fat Resistance Experiment</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { text-align: center; margin-bottom: 1.5rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 160px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .hidden { display: none; }
      #chart-box { max-width: 640px; }
    </style>
  </head>
  <body>
    <h1>Protein-Fat Resistance Experiment</h1>
    <div class="row">
      <label>Fat (%) <input id="fat" type="number" placeholder="Enter.." /></label>
      <label>Resistance (&Omega;)
        <input id="resistance" type="number" placeholder="Enter.." />
      </label>
      <button onclick="addPoint()">Add Data</button>
    </div>
    <div id="chart-box" class="row hidden">
      <canvas id="chart" height="300" width="600"></canvas>
      <p id="equation" class="hidden"></p>
    </div>
    <div class="row">
      <button id="trendline-btn" onclick="generateTrendline()" disabled>
        Generate trendline
      </button>
    </div>
    <div class="row">
      <label>Resistance to predict (&Omega;)
        <input id="query" type="number" placeholder="Enter resistance value"
               oninput="predict()" />
      </label>
      <div id="prediction" class="hidden">
        <p><strong>Fat:</strong> <span id="fat-out"></span>%</p>
        <p><strong>Protein:</strong> <span id="protein-out"></span>%</p>
      </div>
    </div>
    <script>
      let sessionId = null;
      let chart = null;
      let hasTrendline = false;

      async function ensureSession() {
        if (sessionId) return sessionId;
        const res = await fetch('/sessions', { method: 'POST' });
        sessionId = (await res.json()).session_id;
        return sessionId;
      }

      function hideTrendline() {
        hasTrendline = false;
        document.getElementById('equation').classList.add('hidden');
        document.getElementById('prediction').classList.add('hidden');
      }

      function resetSession() {
        sessionId = null;
        hideTrendline();
        if (chart) chart.destroy();
        chart = null;
        document.getElementById('chart-box').classList.add('hidden');
        document.getElementById('trendline-btn').disabled = true;
      }

      async function postPoint(id, fat, resistance) {
        return fetch(`/sessions/${id}/points`, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ fat: Number(fat), resistance: Number(resistance) })
        });
      }

      async function addPoint() {
        const fat = document.getElementById('fat').value;
        const resistance = document.getElementById('resistance').value;
        if (fat === '' || resistance === '') return;
        let res = await postPoint(await ensureSession(), fat, resistance);
        if (res.status === 404) {
          // Session expired: start over with this point.
          resetSession();
          res = await postPoint(await ensureSession(), fat, resistance);
        }
        if (!res.ok) return;
        document.getElementById('trendline-btn').disabled = false;
        if (hasTrendline) {
          await generateTrendline();
        } else {
          await refreshChart();
        }
      }

      async function refreshChart() {
        const res = await fetch(`/sessions/${sessionId}/chart`);
        if (res.status === 404) {
          resetSession();
          return;
        }
        if (!res.ok) return;
        drawChart(await res.json());
      }

      async function generateTrendline() {
        if (!sessionId) return;
        const res = await fetch(`/sessions/${sessionId}/trendline`, { method: 'POST' });
        if (res.status === 404) {
          resetSession();
          return;
        }
        if (!res.ok) {
          hideTrendline();
          await refreshChart();
          return;
        }
        const data = await res.json();
        const equation = document.getElementById('equation');
        hasTrendline = true;
        equation.textContent = `Trendline: ${data.equation}`;
        equation.classList.remove('hidden');
        drawChart(data.chart);
        await predict();
      }

      async function predict() {
        const value = document.getElementById('query').value;
        const box = document.getElementById('prediction');
        if (!sessionId || !hasTrendline || value === '') {
          box.classList.add('hidden');
          return;
        }
        const res = await fetch(`/sessions/${sessionId}/predictions`, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ resistance: Number(value) })
        });
        if (res.status === 404) {
          resetSession();
          return;
        }
        if (!res.ok) {
          box.classList.add('hidden');
          return;
        }
        const data = await res.json();
        document.getElementById('fat-out').textContent = data.fat_display;
        document.getElementById('protein-out').textContent = data.protein_display;
        box.classList.remove('hidden');
      }

      function drawChart(series) {
        document.getElementById('chart-box').classList.remove('hidden');
        const datasets = [{
          label: 'Measured Resistance',
          data: series.labels.map((x, i) => ({ x, y: series.measured[i] })),
          borderColor: 'blue',
          pointBackgroundColor: 'blue',
          fill: false
        }];
        if (hasTrendline && series.trendline) {
          datasets.push({
            label: 'Trendline',
            data: series.labels.map((x, i) => ({ x, y: series.trendline[i] })),
            borderColor: 'red',
            borderDash: [5, 5],
            pointBackgroundColor: 'red',
            fill: false
          });
        }
        if (chart) chart.destroy();
        chart = new Chart(document.getElementById('chart'), {
          type: 'line',
          data: { datasets },
          options: {
            responsive: true,
            plugins: { legend: { position: 'top' } },
            scales: {
              x: { type: 'linear', title: { display: true, text: 'Fat (%)' } },
              y: { type: 'linear', title: { display: true, text: 'Resistance (Ohms)' } }
            }
          }
        });
      }
    </script>
  </body>
</html>
"""
